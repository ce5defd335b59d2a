from typing import Optional

from markupsafe import Markup

from app.components.templating import render
from app.schemas.blog import SeoMeta, Site


def render_seo(meta: SeoMeta, site: Site) -> Markup:
    """Document head tags for a page."""
    full_title = f"{meta.title} | {site.title}" if meta.title else site.title
    return render(
        "seo.html",
        full_title=full_title,
        title=meta.title or site.title,
        description=_plain(meta.description) or _plain(site.description),
        author=site.author or "",
    )


def _plain(value: Optional[str]) -> str:
    if not value:
        return ""
    return Markup(value).striptags()
