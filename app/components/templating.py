from functools import partial
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from app.utils import format_tag_line, link_to

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(enabled_extensions=("html",), default=True),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.globals["tag_line"] = format_tag_line


def render(template_name: str, path_prefix: str = "", **context) -> Markup:
    template = env.get_template(template_name)
    return Markup(template.render(link_to=partial(link_to, prefix=path_prefix), **context))
