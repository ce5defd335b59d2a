import logging

from markupsafe import Markup

from app.components.templating import render
from app.schemas.blog import CommentConfig

logger = logging.getLogger(__name__)


def render_comments(config: CommentConfig, shortname: str) -> Markup:
    """Disqus thread embed. Loading and failures are handled by Disqus itself."""
    if not shortname:
        logger.debug(f"No Disqus shortname configured, skipping thread {config.identifier}")
        return Markup("")
    return render("disqus.html", config=config, shortname=shortname)
