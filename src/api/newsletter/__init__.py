"""Newsletter signup API."""

from src.api.newsletter.endpoints import router

__all__ = ["router"]
