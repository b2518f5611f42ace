"""Health check endpoints."""

import logging

from fastapi import APIRouter, Depends

from src.api.health.models import HealthResponse
from src.api.models import API_VERSION
from src.email_service import EmailConfig, get_email_config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=HealthResponse,
    response_model_by_alias=True,
    summary="Check service health",
    description="Returns the health status of the API service.",
)
def health_check(email_config: EmailConfig = Depends(get_email_config)) -> HealthResponse:
    """Check if the API service is healthy.

    :param email_config: Email configuration, reported without secrets.
    :returns: Health status response.
    """
    logger.debug("Health check requested")
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        email_configured=email_config.is_configured,
    )
