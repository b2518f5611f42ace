"""Custom exceptions for the email service."""

from enum import StrEnum


class ResendClientError(Exception):
    """Raised when a Resend API request fails.

    Covers timeouts, transport failures, and structured error responses
    returned by Resend. ``status_code`` is set when Resend answered.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class EmailErrorReason(StrEnum):
    """Why an email service operation failed."""

    NOT_CONFIGURED = "not_configured"
    REQUEST_FAILED = "request_failed"


class EmailServiceError(Exception):
    """Raised when an email service operation fails.

    The message is safe for logs but is never returned to site visitors.
    The underlying provider or network error, if any, is chained as
    ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        reason: EmailErrorReason = EmailErrorReason.REQUEST_FAILED,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.reason = reason

    @property
    def is_configuration_error(self) -> bool:
        """Whether the failure happened before any provider call was attempted."""
        return self.reason == EmailErrorReason.NOT_CONFIGURED
