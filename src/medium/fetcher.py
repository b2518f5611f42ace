"""Fetcher for a Medium user's public RSS feed."""

import logging

import requests

from src.medium.exceptions import MediumFeedError

logger = logging.getLogger(__name__)

MEDIUM_FEED_BASE_URL = "https://medium.com/feed"

# Default timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = 30

DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/rss+xml, application/xml, text/xml",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
}


def build_feed_url(username: str) -> str:
    """Build the RSS feed URL for a Medium user.

    :param username: Medium username, with or without the "@" prefix.
    :returns: The feed URL, e.g. ``https://medium.com/feed/@easyplantlife``.
    :raises ValueError: If the username is blank.
    """
    handle = username.strip().lstrip("@")
    if not handle:
        raise ValueError("Medium username must not be empty")
    return f"{MEDIUM_FEED_BASE_URL}/@{handle}"


def fetch_feed_xml(url: str, *, timeout: int = DEFAULT_TIMEOUT) -> str:
    """Fetch the raw RSS document.

    :param url: Feed URL.
    :param timeout: Request timeout in seconds.
    :returns: The response body as text.
    :raises MediumFeedError: If the request fails or returns a non-2xx status.
    """
    logger.debug(f"Fetching Medium feed: url={url}")

    try:
        response = requests.get(url, headers=DEFAULT_HEADERS, timeout=timeout)
    except requests.exceptions.Timeout as e:
        raise MediumFeedError(f"Medium feed request timed out after {timeout}s") from e
    except requests.exceptions.RequestException as e:
        raise MediumFeedError(f"Failed to fetch Medium posts: {e}") from e

    if not response.ok:
        raise MediumFeedError(
            f"Failed to fetch Medium RSS feed: {response.status_code} {response.reason}"
        )

    return response.text
