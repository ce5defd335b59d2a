from typing import Annotated, Optional

from markupsafe import Markup
from pydantic import AfterValidator, BaseModel

# Trusted, already-sanitized HTML. Embedded into pages without escaping.
HtmlFragment = Annotated[str, AfterValidator(Markup)]

# Placeholder post that must never show up in the index listing.
DUMMY_SLUG = "/dummy/"

# Content before this marker doubles as the post description.
DESCRIPTION_MARKER = "<!-- description -->"


class Site(BaseModel):
    title: str = ""
    siteUrl: str = ""
    author: Optional[str] = None
    authorSummary: Optional[str] = None
    description: Optional[str] = None
    lang: str = "en"


class PostSummary(BaseModel):
    slug: str
    title: Optional[str] = None
    date: Optional[str] = None
    description: Optional[HtmlFragment] = None
    tags: Optional[str] = None
    excerpt: HtmlFragment = Markup("")
    html: Optional[HtmlFragment] = None

    @property
    def display_title(self) -> str:
        return self.title or self.slug


class Post(PostSummary):
    id: str
    frontmatterId: Optional[str] = None
    html: HtmlFragment = Markup("")

    @property
    def thread_identifier(self) -> str:
        """Comment thread key: the frontmatter id wins over the source id."""
        return self.frontmatterId or self.id


class NavigationContext(BaseModel):
    previous: Optional[PostSummary] = None
    next: Optional[PostSummary] = None


class CommentConfig(BaseModel):
    url: str
    identifier: str
    title: str


class SeoMeta(BaseModel):
    title: str = ""
    description: Optional[str] = None


class RenderContext(BaseModel):
    """Deployment values the renderers need besides the page data."""

    pathPrefix: str = ""
    disqusShortname: str = ""
