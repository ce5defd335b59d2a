from markupsafe import Markup

from app.components.templating import render
from app.schemas.blog import Site


def render_bio(site: Site) -> Markup:
    if not site.author:
        return Markup("")
    return render("bio.html", author=site.author, summary=site.authorSummary or "")
