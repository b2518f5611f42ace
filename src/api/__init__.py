"""API module for the Easy Plant Life site backend."""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
