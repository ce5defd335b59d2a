import datetime
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import frontmatter

from app.schemas.blog import NavigationContext, Post, PostSummary

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%B %d, %Y"


class PostsService:
    def __init__(self, repo, parser, date_format: str = DEFAULT_DATE_FORMAT):
        self.repo = repo
        self.parser = parser
        self.date_format = date_format

    def list_posts(self) -> List[PostSummary]:
        """All posts, newest first. Undated posts sort last."""
        return [PostSummary(**p) for p in self._load_posts()]

    def get_post(self, slug: str) -> Optional[Post]:
        found = self.get_post_with_navigation(slug)
        return found[0] if found else None

    def get_navigation(self, slug: str) -> NavigationContext:
        found = self.get_post_with_navigation(slug)
        return found[1] if found else NavigationContext()

    def get_post_with_navigation(
        self, slug: str
    ) -> Optional[Tuple[Post, NavigationContext]]:
        """The post for `slug` and its neighbours: `previous` is older, `next` is newer."""
        posts = self._load_posts()
        index = next((i for i, p in enumerate(posts) if p["slug"] == slug), None)
        if index is None:
            return None
        nav = NavigationContext(
            previous=PostSummary(**posts[index + 1]) if index + 1 < len(posts) else None,
            next=PostSummary(**posts[index - 1]) if index > 0 else None,
        )
        return Post(**posts[index]), nav

    def _load_posts(self) -> List[dict]:
        keyed = []
        for path in self.repo.list_post_files():
            post_data = parse_post_data(
                path,
                slug=self.repo.slug_for(path),
                post_id=self.repo.relative_path(path),
                parser=self.parser,
                date_format=self.date_format,
            )
            if post_data:
                keyed.append((post_data.pop("_sort_key") or "0000-01-01", post_data))

        keyed.sort(key=lambda item: item[0], reverse=True)
        return [post_data for _, post_data in keyed]


def parse_post_data(
    path: Path,
    slug: str,
    post_id: str,
    *,
    parser,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> Optional[dict]:
    """Parse frontmatter and body and return standardized post data"""
    try:
        markdown = parser.get_markdown_content(path)
        parsed = frontmatter.loads(markdown)
        metadata = parsed.metadata or {}

        html = parser.render_html(parsed.content)
        raw_date = metadata.get("date")
        frontmatter_id = metadata.get("id")

        return {
            "id": post_id,
            "frontmatterId": str(frontmatter_id) if frontmatter_id else None,
            "slug": slug,
            "title": _to_text(metadata.get("title")),
            "date": _format_date(raw_date, date_format),
            "description": _to_text(metadata.get("description")),
            "tags": _normalize_tags(metadata.get("tags")),
            "excerpt": parser.make_excerpt(html),
            "html": html,
            "_sort_key": _sort_key(raw_date),
        }
    except Exception as e:
        logger.warning(f"Failed to parse post {path}: {e}")
        return None


def _to_text(value) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _normalize_tags(value) -> Optional[str]:
    if not value:
        return None
    if isinstance(value, (list, tuple, set)):
        joined = ", ".join(str(item) for item in value if item)
        return joined or None
    return str(value)


def _parse_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value
    if isinstance(value, str):
        try:
            return datetime.datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def _format_date(value, date_format: str) -> Optional[str]:
    if value is None or value == "":
        return None
    parsed = _parse_date(value)
    if parsed is None:
        return str(value)
    return parsed.strftime(date_format)


def _sort_key(value) -> Optional[str]:
    parsed = _parse_date(value)
    if parsed is None:
        return None
    return parsed.isoformat()
