"""Pydantic models for health check endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str = Field(..., description="Service health status")
    version: str = Field(..., description="Application version")
    email_configured: bool = Field(..., description="Whether RESEND_API_KEY is set")
