import datetime
from typing import Optional

from markupsafe import Markup

from app.components.templating import render

ROOT_PATH = "/"


def is_root_path(current_path: str) -> bool:
    """`current_path` is relative to the app, so the index is always "/"."""
    return current_path == ROOT_PATH


def render_layout(
    current_path: str,
    site_title: Optional[str],
    children: Markup,
    path_prefix: str = "",
) -> Markup:
    """Wrap page content with the site header and footer."""
    return render(
        "layout.html",
        path_prefix=path_prefix,
        is_root_path=is_root_path(current_path),
        title=site_title or "",
        children=children,
        year=datetime.date.today().year,
    )
