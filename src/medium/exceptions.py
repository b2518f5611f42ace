"""Custom exceptions for the Medium feed integration."""


class MediumFeedError(Exception):
    """Raised when the Medium RSS feed cannot be fetched or parsed."""

    pass
