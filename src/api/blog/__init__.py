"""Blog API."""

from src.api.blog.endpoints import router

__all__ = ["router"]
