"""Request parsing and field validation shared by the form endpoints."""

import json
import logging
import re
from typing import Any

from fastapi import Request

logger = logging.getLogger(__name__)

# local@domain.tld with no whitespace and exactly one "@"
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

INVALID_BODY_MESSAGE = "Invalid request body"
EMAIL_REQUIRED_MESSAGE = "Email is required"
INVALID_EMAIL_MESSAGE = "Invalid email format"


class SubmissionValidationError(ValueError):
    """Raised when a form submission fails validation.

    The message is shown to the visitor verbatim.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


async def read_json_object(request: Request) -> dict[str, Any] | None:
    """Parse the request body as JSON.

    Used as a dependency so the endpoints themselves can stay synchronous.

    :param request: The incoming request.
    :returns: The decoded object, an empty dict for JSON that is not an
        object, or None if the body is not valid JSON.
    """
    raw = await request.body()
    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("Rejected request with invalid JSON body")
        return None

    if not isinstance(body, dict):
        return {}
    return body


def clean_text(value: Any) -> str | None:
    """Trim a string field.

    :param value: Raw field value.
    :returns: The trimmed string, or None if not a string or blank.
    """
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def normalise_email(value: Any) -> str:
    """Validate and normalise an email field.

    :param value: Raw field value.
    :returns: The trimmed, lowercased address.
    :raises SubmissionValidationError: If missing, blank, not a string, or malformed.
    """
    email = clean_text(value)
    if email is None:
        raise SubmissionValidationError(EMAIL_REQUIRED_MESSAGE)

    email = email.lower()
    if not EMAIL_PATTERN.match(email):
        raise SubmissionValidationError(INVALID_EMAIL_MESSAGE)
    return email
