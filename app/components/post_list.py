from typing import Iterable, Iterator

from markupsafe import Markup
from pydantic import BaseModel

from app.components.templating import render
from app.schemas.blog import DESCRIPTION_MARKER, DUMMY_SLUG, HtmlFragment, PostSummary
from app.utils import format_tag_line


class PostListItem(BaseModel):
    slug: str
    title: str
    tag_line: str
    summary: HtmlFragment


def summary_html(post: PostSummary) -> Markup:
    """Description, else the html before the description marker, else the excerpt."""
    if post.description:
        return Markup(post.description)
    if post.html and DESCRIPTION_MARKER in post.html:
        head = str(post.html).split(DESCRIPTION_MARKER)[0]
        if head:
            return Markup(head)
    return Markup(post.excerpt)


def iter_post_items(posts: Iterable[PostSummary]) -> Iterator[PostListItem]:
    for post in posts:
        if post.slug == DUMMY_SLUG:
            continue
        yield PostListItem(
            slug=post.slug,
            title=post.display_title,
            tag_line=format_tag_line(post.tags, post.date),
            summary=summary_html(post),
        )


def render_post_list(posts: Iterable[PostSummary], path_prefix: str = "") -> Markup:
    return render("post_list.html", path_prefix=path_prefix, items=iter_post_items(posts))
