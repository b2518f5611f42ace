"""Parser for Medium RSS feed XML."""

import logging
import math
import re
from datetime import UTC, datetime

from bs4 import BeautifulSoup, Tag
from dateutil import parser as dateparser

from src.medium.exceptions import MediumFeedError
from src.medium.models import NormalizedPost

logger = logging.getLogger(__name__)

DEFAULT_MAX_POSTS = 10

# Medium's own estimate of reading speed
WORDS_PER_MINUTE = 265

# Medium guids look like https://medium.com/p/abc123
GUID_ID_PATTERN = re.compile(r"/p/([a-zA-Z0-9]+)$")

WHITESPACE_PATTERN = re.compile(r"\s+")

REQUIRED_FIELDS = ("title", "link", "guid", "pubDate", "description")


class InvalidFeedItemError(ValueError):
    """Raised when a single feed item cannot be turned into a post."""

    pass


def parse_medium_feed(xml: str, *, max_posts: int = DEFAULT_MAX_POSTS) -> list[NormalizedPost]:
    """Parse a Medium RSS document into normalised posts.

    Items that cannot be parsed are skipped so that one malformed entry does
    not drop the whole feed.

    :param xml: The raw RSS XML.
    :param max_posts: Maximum number of posts to return.
    :returns: Posts in feed order, at most max_posts, with unique URLs.
    :raises MediumFeedError: If the document is not an RSS feed.
    """
    soup = BeautifulSoup(xml, "xml")

    rss = soup.find("rss")
    channel = rss.find("channel") if isinstance(rss, Tag) else None
    if not isinstance(channel, Tag):
        raise MediumFeedError("Failed to parse Medium RSS feed: Invalid XML")

    items = channel.find_all("item", recursive=False)
    logger.debug(f"Found {len(items)} items in Medium feed")

    posts: list[NormalizedPost] = []
    seen_urls: set[str] = set()

    for index, item in enumerate(items):
        if len(posts) >= max_posts:
            break

        try:
            post = _parse_item(item)
        except InvalidFeedItemError as e:
            logger.debug(f"Skipping feed item {index}: {e}")
            continue

        if post.url in seen_urls:
            logger.debug(f"Skipping feed item {index}: duplicate url={post.url}")
            continue

        seen_urls.add(post.url)
        posts.append(post)

    logger.info(f"Extracted {len(posts)} posts from Medium feed")
    return posts


def _parse_item(item: Tag) -> NormalizedPost:
    """Build a post from an RSS ``<item>``.

    :param item: The item tag.
    :returns: The normalised post.
    :raises InvalidFeedItemError: If a required field is missing or invalid.
    """
    fields = {name: _child_text(item, name) for name in REQUIRED_FIELDS}
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise InvalidFeedItemError(f"missing {', '.join(missing)}")

    published_date = _parse_date(fields["pubDate"])  # type: ignore[arg-type]

    excerpt = _html_to_text(fields["description"])  # type: ignore[arg-type]
    if not excerpt:
        raise InvalidFeedItemError("empty excerpt")

    content_html = _child_text(item, "content:encoded")
    categories = [
        text for tag in item.find_all("category", recursive=False) if (text := tag.get_text(strip=True))
    ]

    return NormalizedPost(
        post_id=_extract_id_from_guid(fields["guid"]),  # type: ignore[arg-type]
        title=fields["title"],
        excerpt=excerpt,
        url=fields["link"],
        published_date=published_date,
        thumbnail=_extract_thumbnail(item, content_html),
        read_time=_estimate_read_time(content_html),
        categories=categories or None,
    )


def _child_text(item: Tag, name: str) -> str | None:
    """Return the stripped text of a direct child element, if present.

    :param item: The parent tag.
    :param name: Element name, optionally namespace-prefixed (``content:encoded``).
    :returns: The text, or None if the element is absent or empty.
    """
    child = item.find(name, recursive=False)
    if not isinstance(child, Tag):
        return None
    text = child.get_text(strip=True)
    return text or None


def _parse_date(value: str) -> datetime:
    """Parse an RFC 822 style publication date.

    :param value: The raw pubDate text.
    :returns: A timezone-aware datetime (UTC assumed when no zone is given).
    :raises InvalidFeedItemError: If the date cannot be parsed.
    """
    try:
        parsed = dateparser.parse(value)
    except (ValueError, OverflowError) as e:
        raise InvalidFeedItemError(f"invalid pubDate {value!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _html_to_text(html: str) -> str:
    """Strip tags, decode entities and collapse whitespace.

    :param html: HTML fragment.
    :returns: Plain text.
    """
    text = BeautifulSoup(html, "lxml").get_text(" ")
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def _extract_id_from_guid(guid: str) -> str:
    """Extract the post ID from a Medium guid URL.

    :param guid: e.g. ``https://medium.com/p/abc123``.
    :returns: ``abc123``, or the guid itself when it has another shape.
    """
    match = GUID_ID_PATTERN.search(guid)
    return match.group(1) if match else guid


def _extract_thumbnail(item: Tag, content_html: str | None) -> str | None:
    """Find a preview image for the post.

    Prefers ``<media:thumbnail url="...">`` and falls back to the first image
    in the full content.

    :param item: The item tag.
    :param content_html: The ``content:encoded`` HTML, if any.
    :returns: Image URL or None.
    """
    thumbnail = item.find("media:thumbnail", recursive=False)
    if isinstance(thumbnail, Tag):
        url = thumbnail.get("url")
        if isinstance(url, str) and url.strip():
            return url.strip()

    if content_html:
        img = BeautifulSoup(content_html, "lxml").find("img", src=True)
        if isinstance(img, Tag):
            src = img.get("src")
            if isinstance(src, str) and src.strip():
                return src.strip()

    return None


def _estimate_read_time(content_html: str | None) -> int | None:
    """Estimate reading time from the full content.

    :param content_html: The ``content:encoded`` HTML, if any.
    :returns: Minutes to read (at least 1), or None without content.
    """
    if not content_html:
        return None

    words = len(_html_to_text(content_html).split())
    if words == 0:
        return None
    return max(1, math.ceil(words / WORDS_PER_MINUTE))
