import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.routers import pages
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def check_content_dir() -> bool:
    content_path = settings.content_path
    if not content_path.is_dir():
        logger.warning(f"Content directory {content_path} not found, index will be empty")
        return False
    logger.info(f"Serving posts from {content_path.resolve()}")
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    check_content_dir()
    try:
        yield
    finally:
        logger.info("Blog exited gracefully")


app = FastAPI(
    title="Blog",
    description="Markdown blog pages",
    root_path=settings.PATH_PREFIX,
    lifespan=lifespan,
)


# Registered before the page router so the catch-all slug route does not shadow it
@app.get("/healthz")
async def healthz():
    return {"message": "Blog is running"}


app.include_router(pages.router)
