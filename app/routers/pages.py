import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from app import dependencies as deps
from app.components.pages import (
    render_index_page,
    render_not_found_page,
    render_post_page,
)
from app.schemas.blog import RenderContext, Site
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    site: Site = Depends(deps.get_site),
    context: RenderContext = Depends(deps.get_render_context),
):
    """Render the list of all posts."""
    try:
        posts = service.list_posts()
        return HTMLResponse(
            render_index_page(posts, site, app_path(request), context)
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering post index: {e}")
        raise HTTPException(status_code=500, detail="Failed to render posts")


@router.get("/{slug:path}", response_class=HTMLResponse)
def blog_post(
    slug: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    site: Site = Depends(deps.get_site),
    context: RenderContext = Depends(deps.get_render_context),
):
    """Render a single post with its previous/next neighbours."""
    slug = normalize_slug(slug)
    current_path = app_path(request)
    try:
        found = service.get_post_with_navigation(slug)
        if not found:
            return HTMLResponse(
                render_not_found_page(site, current_path, context), status_code=404
            )
        post, nav = found
        return HTMLResponse(render_post_page(post, nav, site, current_path, context))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render post")


def normalize_slug(slug: str) -> str:
    stripped = slug.strip("/")
    return f"/{stripped}/" if stripped else "/"


def app_path(request: Request) -> str:
    """Request path with the deployment root path removed."""
    path = request.scope["path"]
    root_path = request.scope.get("root_path", "")
    if root_path and (path == root_path or path.startswith(f"{root_path}/")):
        path = path[len(root_path):]
    return path or "/"
