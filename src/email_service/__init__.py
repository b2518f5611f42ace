"""Resend-backed email service for newsletter signups and contact messages."""

from src.email_service.client import ResendClient, get_resend_client
from src.email_service.config import EmailConfig, get_email_config
from src.email_service.exceptions import EmailErrorReason, EmailServiceError, ResendClientError
from src.email_service.models import NewsletterSignupResult, SendEmailResult
from src.email_service.service import EmailService, get_email_service

__all__ = [
    "EmailConfig",
    "EmailErrorReason",
    "EmailService",
    "EmailServiceError",
    "NewsletterSignupResult",
    "ResendClient",
    "ResendClientError",
    "SendEmailResult",
    "get_email_config",
    "get_email_service",
    "get_resend_client",
]
