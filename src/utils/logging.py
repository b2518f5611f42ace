"""Logging configuration for the site backend."""

import logging
import os
import re
import sys
from collections.abc import Iterable

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers owned by the ASGI server; they must propagate to our root handler
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# Chatty HTTP client libraries used by the Resend and Medium integrations
HTTP_CLIENT_LOGGERS = ("urllib3", "requests", "httpx")

# Package logger -> env var holding its level override
PACKAGE_LEVEL_ENV_VARS = {
    "src.medium": "LOG_FEED_LEVEL",
    "src.email_service": "LOG_EMAIL_LEVEL",
}

EMAIL_ADDRESS_PATTERN = re.compile(r"[^\s@<>\"']+@[^\s@<>\"']+\.[^\s@<>\"']+")


class EmailRedactionFilter(logging.Filter):
    """Mask email addresses in records above DEBUG.

    Visitor addresses may only appear in debug output.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno <= logging.DEBUG:
            return True

        message = record.getMessage()
        redacted = EMAIL_ADDRESS_PATTERN.sub(_mask_email, message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def _mask_email(match: re.Match[str]) -> str:
    local, _, domain = match.group(0).partition("@")
    return f"{local[:1]}***@{domain}"


def _parse_level(level: str) -> int:
    numeric_level = getattr(logging, level.strip().upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


def _set_logger_levels(names: Iterable[str], level: int) -> None:
    for name in names:
        logging.getLogger(name).setLevel(level)


def _apply_package_levels() -> None:
    """Apply per-package level overrides, resetting packages without one."""
    for name, env_var in PACKAGE_LEVEL_ENV_VARS.items():
        override = os.environ.get(env_var)
        logging.getLogger(name).setLevel(_parse_level(override) if override else logging.NOTSET)


def configure_logging() -> None:
    """Configure application-wide logging to stdout only.

    Env vars:
      - LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL (default INFO)
      - LOG_FEED_LEVEL: level for the Medium feed code, e.g. DEBUG to see skipped items
      - LOG_EMAIL_LEVEL: level for the email service code
      - LOG_UVICORN_ACCESS: true/false (default false)

    :raises ValueError: If any level is not a valid level name.
    """
    level_name = os.environ.get("LOG_LEVEL", "INFO")
    level = _parse_level(level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Exactly one stdout handler, whatever ran before us.
    root_logger.handlers.clear()

    # The handler passes everything; loggers decide what is emitted.
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.addFilter(EmailRedactionFilter())
    root_logger.addHandler(handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

    access_enabled = os.environ.get("LOG_UVICORN_ACCESS", "false").strip().lower() == "true"
    if not access_enabled:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    _set_logger_levels(HTTP_CLIENT_LOGGERS, level=max(level, logging.INFO))
    _apply_package_levels()

    logging.getLogger(__name__).info("Logging configured: level=%s", level_name.upper())
