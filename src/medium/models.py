"""Pydantic models for normalised Medium feed data."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NormalizedPost(BaseModel):
    """A blog post extracted from the Medium RSS feed.

    Optional fields are None when the feed did not provide them and are
    dropped on serialisation rather than sent as empty strings.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    post_id: str
    title: str
    excerpt: str
    url: str
    published_date: datetime
    thumbnail: str | None = None
    read_time: int | None = Field(default=None, ge=1, description="Estimated minutes to read")
    categories: list[str] | None = None


class BlogFeed(BaseModel):
    """Posts served to the page layer, with the state of the last refresh."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    posts: list[NormalizedPost] = Field(default_factory=list)
    fetched_at: datetime | None = None
    stale: bool = False
    error: str | None = None
