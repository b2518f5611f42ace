"""Blog endpoints republishing the Medium feed."""

import logging

from fastapi import APIRouter, Depends

from src.api.blog.models import BlogPostsResponse
from src.medium import MediumFeedService, get_medium_feed_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blog", tags=["Blog"])


@router.get(
    "/posts",
    response_model=BlogPostsResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    summary="List blog posts",
    description="Returns excerpts of the latest Medium posts. Feed failures are reported "
    "in the error field rather than as an error status.",
)
def list_blog_posts(
    feed_service: MediumFeedService = Depends(get_medium_feed_service),
) -> BlogPostsResponse:
    """List the latest blog posts.

    :param feed_service: Medium feed service.
    :returns: Posts with the state of the last feed refresh.
    """
    feed = feed_service.get_feed()
    logger.info(f"List blog posts: count={len(feed.posts)}, stale={feed.stale}")

    return BlogPostsResponse(
        posts=feed.posts,
        total=len(feed.posts),
        stale=feed.stale,
        error=feed.error,
        fetched_at=feed.fetched_at,
    )
