"""Contact form API."""

from src.api.contact.endpoints import router

__all__ = ["router"]
