from fastapi import Depends

from app.repos.posts_repo import FilesystemPostsRepo
from app.schemas.blog import RenderContext, Site
from app.services.content_parser import ContentParser
from app.services.posts_service import PostsService
from app.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_site(current_settings: Settings = Depends(get_settings)) -> Site:
    return Site(
        title=current_settings.SITE_TITLE,
        siteUrl=current_settings.SITE_URL,
        author=current_settings.SITE_AUTHOR or None,
        authorSummary=current_settings.SITE_AUTHOR_SUMMARY or None,
        description=current_settings.SITE_DESCRIPTION or None,
        lang=current_settings.SITE_LANG,
    )


def get_render_context(
    current_settings: Settings = Depends(get_settings),
) -> RenderContext:
    return RenderContext(
        pathPrefix=current_settings.PATH_PREFIX,
        disqusShortname=current_settings.DISQUS_SHORTNAME,
    )


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemPostsRepo(current_settings.content_path)


def get_content_parser(current_settings: Settings = Depends(get_settings)):
    return ContentParser(excerpt_length=current_settings.EXCERPT_LENGTH)


def get_posts_service(
    repo=Depends(get_posts_repo),
    parser=Depends(get_content_parser),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(
        repo=repo, parser=parser, date_format=current_settings.DATE_FORMAT
    )
