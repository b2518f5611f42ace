"""Pydantic models for the blog endpoint."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.medium.models import NormalizedPost


class BlogPostsResponse(BaseModel):
    """Response model for the blog posts endpoint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    posts: list[NormalizedPost] = Field(..., description="Posts, newest first as published")
    total: int = Field(..., description="Number of posts returned")
    stale: bool = Field(default=False, description="Served from cache after a failed refresh")
    error: str | None = Field(default=None, description="Message shown when loading failed")
    fetched_at: datetime | None = Field(default=None, description="When the posts were fetched")
