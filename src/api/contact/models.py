"""Pydantic models for the contact form endpoint."""

from pydantic import BaseModel, Field


class ContactRequest(BaseModel):
    """Documented shape of a contact form body."""

    name: str = Field(..., description="Visitor name")
    email: str = Field(..., description="Visitor email address")
    message: str = Field(..., description="Message for the site owner")
    website: str | None = Field(
        default=None,
        description="Honeypot field; left empty by real visitors",
    )


class ContactSubmission(BaseModel):
    """A validated, normalised contact form submission."""

    name: str
    email: str
    message: str
