"""FastAPI application configuration."""

import logging
import os

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.blog import router as blog_router
from src.api.contact import router as contact_router
from src.api.health import router as health_router
from src.api.models import API_VERSION, ErrorResponse
from src.api.newsletter import router as newsletter_router
from src.observability.sentry import init_sentry
from src.utils.logging import configure_logging

configure_logging()
init_sentry()

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)


def get_cors_origins() -> list[str]:
    """Build the list of allowed CORS origins.

    Always includes the local frontend dev server. Additional origins are read
    from CORS_ORIGINS as a comma-separated list, e.g.
    ``CORS_ORIGINS=https://easyplantlife.com,https://www.easyplantlife.com``.
    Duplicates are removed while preserving order.

    :returns: Ordered list of origins.
    """
    extra = [o.strip() for o in os.environ.get("CORS_ORIGINS", "").split(",") if o.strip()]
    return list(dict.fromkeys([*DEFAULT_CORS_ORIGINS, *extra]))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    :returns: Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Easy Plant Life API",
        version=API_VERSION,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    # Site-facing routes live under /api
    api_router = APIRouter(prefix="/api")
    api_router.include_router(newsletter_router)
    api_router.include_router(contact_router)
    api_router.include_router(blog_router)

    application.include_router(health_router)
    application.include_router(api_router)

    logger.info("FastAPI application created")

    return application


# Application instance for uvicorn
app = create_app()
