"""Medium RSS feed ingestion for the blog page."""

from src.medium.config import MediumConfig, get_medium_config
from src.medium.exceptions import MediumFeedError
from src.medium.fetcher import build_feed_url, fetch_feed_xml
from src.medium.models import BlogFeed, NormalizedPost
from src.medium.parser import parse_medium_feed
from src.medium.service import MediumFeedService, get_medium_feed_service

__all__ = [
    "BlogFeed",
    "MediumConfig",
    "MediumFeedError",
    "MediumFeedService",
    "NormalizedPost",
    "build_feed_url",
    "fetch_feed_xml",
    "get_medium_config",
    "get_medium_feed_service",
    "parse_medium_feed",
]
