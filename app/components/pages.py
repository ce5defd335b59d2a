from typing import List, Optional

from markupsafe import Markup

from app.components.bio import render_bio
from app.components.layout import render_layout
from app.components.post_detail import render_post_detail
from app.components.post_list import render_post_list
from app.components.seo import render_seo
from app.components.templating import render
from app.schemas.blog import (
    NavigationContext,
    Post,
    PostSummary,
    RenderContext,
    SeoMeta,
    Site,
)

INDEX_PAGE_TITLE = "All posts"
POST_PAGE_HEADER = "All posts"


def render_document(head: Markup, body: Markup, site: Site) -> str:
    return str(render("document.html", head=head, body=body, lang=site.lang))


def render_index_page(
    posts: List[PostSummary],
    site: Site,
    current_path: str,
    context: Optional[RenderContext] = None,
) -> str:
    context = context or RenderContext()
    body = render(
        "index.html",
        post_list=render_post_list(posts, path_prefix=context.pathPrefix),
        bio=render_bio(site),
    )
    return render_document(
        render_seo(SeoMeta(title=INDEX_PAGE_TITLE), site),
        render_layout(current_path, site.title, body, path_prefix=context.pathPrefix),
        site,
    )


def render_post_page(
    post: Post,
    nav: NavigationContext,
    site: Site,
    current_path: str,
    context: Optional[RenderContext] = None,
) -> str:
    context = context or RenderContext()
    meta = SeoMeta(title=post.display_title, description=post.description or post.excerpt)
    article = render_post_detail(
        post,
        nav,
        site,
        current_path,
        disqus_shortname=context.disqusShortname,
        path_prefix=context.pathPrefix,
    )
    return render_document(
        render_seo(meta, site),
        render_layout(
            current_path, POST_PAGE_HEADER, article, path_prefix=context.pathPrefix
        ),
        site,
    )


def render_not_found_page(
    site: Site, current_path: str, context: Optional[RenderContext] = None
) -> str:
    context = context or RenderContext()
    return render_document(
        render_seo(SeoMeta(title="404: Not Found"), site),
        render_layout(
            current_path,
            site.title,
            render("not_found.html"),
            path_prefix=context.pathPrefix,
        ),
        site,
    )
