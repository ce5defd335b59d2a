from markupsafe import Markup

from app.components.bio import render_bio
from app.components.disqus import render_comments
from app.components.templating import render
from app.schemas.blog import CommentConfig, NavigationContext, Post, Site


def comment_config(post: Post, site: Site) -> CommentConfig:
    return CommentConfig(
        url=f"{site.siteUrl}{post.slug}",
        identifier=post.thread_identifier,
        title=post.display_title,
    )


def render_post_detail(
    post: Post,
    nav: NavigationContext,
    site: Site,
    current_path: str,
    disqus_shortname: str = "",
    path_prefix: str = "",
) -> Markup:
    """Article body, previous/next row, then the comment thread."""
    return render(
        "post_detail.html",
        path_prefix=path_prefix,
        post=post,
        nav=nav,
        bio=render_bio(site),
        comments=render_comments(comment_config(post, site), disqus_shortname),
    )
