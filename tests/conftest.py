import textwrap
from pathlib import Path

import pytest

from app.schemas.blog import NavigationContext, Post, PostSummary, Site


def write_post(root: Path, relative: str, markdown: str) -> Path:
    """Write a dedented Markdown source under `root` and return its path."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(markdown).lstrip(), encoding="utf-8")
    return path


def make_summary(slug: str, **fields) -> PostSummary:
    return PostSummary(**{"slug": slug, **fields})


def make_post(slug: str = "/hello/", **fields) -> Post:
    defaults = {
        "id": "hello/index.md",
        "slug": slug,
        "title": "Hello",
        "date": "January 01, 2024",
        "excerpt": "Hello excerpt",
        "html": "<p>Hello body</p>",
    }
    return Post(**{**defaults, **fields})


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_posts_return=None,
        get_post_return=None,
        navigation_return=None,
        error=None,
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._navigation_return = navigation_return or NavigationContext()
        self._error = error
        self.calls = []

    def list_posts(self):
        self.calls.append("list_posts")
        if self._error:
            raise self._error
        return self._list_posts_return

    def get_post(self, slug: str):
        self.calls.append(("get_post", slug))
        if self._error:
            raise self._error
        return self._get_post_return

    def get_navigation(self, slug: str):
        self.calls.append(("get_navigation", slug))
        return self._navigation_return

    def get_post_with_navigation(self, slug: str):
        self.calls.append(("get_post_with_navigation", slug))
        if self._error:
            raise self._error
        if self._get_post_return is None:
            return None
        return self._get_post_return, self._navigation_return


class FakeParser:
    """
    Content parser stand-in keyed by file name; bodies pass through as html.
    """

    def __init__(self, content_by_name: dict[str, str]):
        self.content_by_name = content_by_name

    def get_markdown_content(self, path: Path) -> str:
        raw = self.content_by_name.get(path.name)
        if raw is None:
            raise FileNotFoundError(path)
        return textwrap.dedent(raw).lstrip()

    def render_html(self, text: str) -> str:
        return text.strip()

    def make_excerpt(self, html: str) -> str:
        return html[:20]


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, names):
        self.paths = [Path("content") / name for name in names]
        self.list_calls = 0

    def list_post_files(self):
        self.list_calls += 1
        return list(self.paths)

    def relative_path(self, path: Path) -> str:
        return path.name

    def slug_for(self, path: Path) -> str:
        return f"/{path.stem}/"


@pytest.fixture
def site() -> Site:
    return Site(
        title="Notebook",
        siteUrl="https://example.com",
        author="Ada",
        authorSummary="writes about engines.",
        description="A small notebook",
    )


@pytest.fixture
def content_dir(tmp_path) -> Path:
    root = tmp_path / "blog"
    root.mkdir()
    return root
