"""Pydantic models for the newsletter signup endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class NewsletterSignupRequest(BaseModel):
    """Documented shape of a newsletter signup body."""

    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., description="Subscriber email address")
    first_name: str | None = Field(
        default=None,
        alias="firstName",
        description="Optional first name for personalisation",
    )


class NewsletterSubmission(BaseModel):
    """A validated, normalised newsletter signup."""

    email: str
    first_name: str | None = None
