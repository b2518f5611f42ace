"""Service layer serving Medium posts with time-based revalidation."""

import logging
import threading
import time
from collections.abc import Callable
from datetime import UTC, datetime
from functools import lru_cache

from src.medium.config import MediumConfig, get_medium_config
from src.medium.exceptions import MediumFeedError
from src.medium.fetcher import build_feed_url, fetch_feed_xml
from src.medium.models import BlogFeed, NormalizedPost
from src.medium.parser import parse_medium_feed

logger = logging.getLogger(__name__)

FEED_UNAVAILABLE_MESSAGE = "Unable to load blog posts. Please try again later."


class MediumFeedService:
    """Fetches, parses and caches a Medium feed.

    A fetched feed is served unchanged until ``revalidate_seconds`` have
    passed. A failed refresh never raises: the last good posts are served
    (marked stale) or, if there are none, an empty list. After a failure no
    fetch is attempted for ``retry_backoff_seconds``.

    Only one thread refreshes at a time. While it does, other callers get the
    cached posts straight away; callers only wait when there is nothing cached
    yet.
    """

    def __init__(
        self,
        config: MediumConfig,
        *,
        fetch: Callable[..., str] = fetch_feed_xml,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialise the service.

        :param config: Medium feed configuration.
        :param fetch: Callable taking the feed URL and a ``timeout`` keyword,
            returning the raw XML.
        :param clock: Monotonic clock in seconds.
        """
        self._config = config
        self._fetch = fetch
        self._clock = clock
        self._feed_url = build_feed_url(config.username)
        self._lock = threading.Lock()
        self._posts: list[NormalizedPost] | None = None
        self._fetched_at: datetime | None = None
        self._refreshed_at: float | None = None
        self._failed_at: float | None = None

    @property
    def feed_url(self) -> str:
        """The RSS URL this service reads."""
        return self._feed_url

    def _is_fresh(self) -> bool:
        if self._refreshed_at is None:
            return False
        return self._clock() - self._refreshed_at < self._config.revalidate_seconds

    def _in_backoff(self) -> bool:
        if self._failed_at is None:
            return False
        return self._clock() - self._failed_at < self._config.retry_backoff_seconds

    def get_feed(self) -> BlogFeed:
        """Get the current posts, refreshing them if the cache has expired.

        :returns: The posts together with the state of the last refresh.
        """
        if self._posts is not None:
            if not self._lock.acquire(blocking=False):
                logger.debug("Medium feed refresh in progress, serving cached posts")
                return self._cached_feed()
        else:
            self._lock.acquire()

        try:
            return self._get_feed_locked()
        finally:
            self._lock.release()

    def _get_feed_locked(self) -> BlogFeed:
        if self._posts is not None and self._is_fresh():
            logger.debug("Serving Medium posts from cache")
            return self._cached_feed()

        if self._in_backoff():
            logger.debug("Medium feed refresh skipped: retry backoff active")
            return self._cached_feed()

        start = time.perf_counter()
        try:
            xml = self._fetch(self._feed_url, timeout=self._config.request_timeout)
            posts = parse_medium_feed(xml, max_posts=self._config.max_posts)
        except MediumFeedError as e:
            self._failed_at = self._clock()
            if self._posts is not None:
                logger.warning(
                    f"Medium feed refresh failed, serving {len(self._posts)} cached posts: {e}"
                )
            else:
                logger.warning(f"Medium feed refresh failed with no cached posts: {e}")
            return self._cached_feed()

        self._posts = posts
        self._fetched_at = datetime.now(UTC)
        self._refreshed_at = self._clock()
        self._failed_at = None

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"Medium feed refreshed: posts={len(posts)}, elapsed={elapsed_ms:.0f}ms")
        return self._cached_feed()

    def _cached_feed(self) -> BlogFeed:
        """Build a response from the cached state.

        After a failed refresh the cached posts are marked stale, or an empty
        list is returned when nothing was ever fetched.

        :returns: The cached feed.
        """
        posts = self._posts
        failed = self._failed_at is not None

        if posts is None:
            return BlogFeed(posts=[], error=FEED_UNAVAILABLE_MESSAGE if failed else None)

        return BlogFeed(
            posts=list(posts),
            fetched_at=self._fetched_at,
            stale=failed,
            error=FEED_UNAVAILABLE_MESSAGE if failed else None,
        )

    def get_posts(self) -> list[NormalizedPost]:
        """Get the current posts without refresh metadata.

        :returns: List of posts, possibly empty.
        """
        return self.get_feed().posts

    def invalidate(self) -> None:
        """Drop the cached posts so the next call refetches."""
        with self._lock:
            self._posts = None
            self._fetched_at = None
            self._refreshed_at = None
            self._failed_at = None
        logger.info("Medium feed cache invalidated")


@lru_cache
def get_medium_feed_service() -> MediumFeedService:
    """Get the process-wide Medium feed service.

    :returns: Shared MediumFeedService built from cached settings.
    """
    return MediumFeedService(get_medium_config())
