import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.routers import posts, site
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Content API", description="Markdown blog content for the site")


@asynccontextmanager
async def lifespan(app: FastAPI):
    content_path = settings.content_path
    if content_path.is_dir():
        logger.info(f"Serving posts from {content_path.resolve()}")
    else:
        logger.warning(
            f"Content directory {content_path} does not exist, listings will be empty"
        )
    yield


app.router.lifespan_context = lifespan

app.include_router(posts.router)
app.include_router(site.router)


@app.get("/")
async def root():
    return {"message": "Content API is running"}
