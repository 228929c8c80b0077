import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.blog import PostDetail, PostSummary, RouteParams
from app.services.posts_service import MalformedMetadataError, PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all published posts, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug, with its body rendered to HTML."""
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except MalformedMetadataError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=422, detail="Malformed post metadata")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/slugs", response_model=List[RouteParams])
def list_slugs(service: PostsService = Depends(deps.get_posts_service)):
    """Route parameters for every post file, published or not."""
    try:
        return service.list_slugs()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing slugs: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve slugs")
