from pathlib import Path

import markdown
from markupsafe import Markup

from app.utils import prune_text

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "toc"]


class ContentParser:
    def __init__(self, excerpt_length: int = 160):
        self.excerpt_length = excerpt_length

    def get_markdown_content(self, path: Path) -> str:
        """Read a Markdown source file as UTF-8 text."""
        return path.read_text(encoding="utf-8")

    def render_html(self, text: str) -> Markup:
        """Convert a Markdown body to HTML. Raw HTML and comments pass through."""
        return Markup(markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS))

    def make_excerpt(self, html: str) -> Markup:
        """Plain-text summary of rendered HTML, escaped for embedding."""
        text = Markup(html).striptags()
        return Markup.escape(prune_text(text, self.excerpt_length))
