"""Pydantic models for email service results."""

from typing import Literal

from pydantic import BaseModel


class NewsletterSignupResult(BaseModel):
    """Outcome of adding a contact to the newsletter audience."""

    success: Literal[True] = True
    contact_id: str


class SendEmailResult(BaseModel):
    """Outcome of sending a transactional email."""

    success: Literal[True] = True
    email_id: str
