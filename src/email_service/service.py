"""Email service layer for newsletter signups and transactional email."""

import logging

from src.email_service.client import ResendClient, get_resend_client
from src.email_service.config import EmailConfig, get_email_config
from src.email_service.exceptions import (
    EmailErrorReason,
    EmailServiceError,
    ResendClientError,
)
from src.email_service.models import NewsletterSignupResult, SendEmailResult

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Email service not configured"


class EmailService:
    """High-level email operations backed by Resend.

    Every outcome is either a result model or an EmailServiceError, so callers
    never see provider payloads or provider exceptions.
    """

    def __init__(self, client: ResendClient | None, config: EmailConfig) -> None:
        """Initialise the service.

        :param client: Resend client, or None when the service is not configured.
        :param config: Email configuration.
        """
        self._client = client
        self._config = config

    @property
    def is_configured(self) -> bool:
        """Whether a provider client is available."""
        return self._client is not None

    def _require_client(self) -> ResendClient:
        if self._client is None:
            raise EmailServiceError(NOT_CONFIGURED_MESSAGE, reason=EmailErrorReason.NOT_CONFIGURED)
        return self._client

    def add_to_newsletter(
        self,
        email: str,
        first_name: str | None = None,
    ) -> NewsletterSignupResult:
        """Add a contact to the newsletter audience.

        The email is expected to be validated and normalised by the caller.

        :param email: Subscriber email address.
        :param first_name: Optional first name for personalisation.
        :returns: Result with the created contact ID.
        :raises EmailServiceError: If the service is not configured or the call fails.
        """
        client = self._require_client()

        try:
            contact_id = client.create_contact(
                audience_id=self._config.audience_id,
                email=email,
                first_name=first_name or None,
            )
        except ResendClientError as e:
            raise EmailServiceError(f"Failed to add contact to newsletter: {e.message}") from e

        logger.info(f"Newsletter contact added: contact_id={contact_id}")
        return NewsletterSignupResult(contact_id=contact_id)

    def send_email(
        self,
        to: str,
        subject: str,
        *,
        html: str | None = None,
        text: str | None = None,
        from_address: str | None = None,
        reply_to: str | None = None,
    ) -> SendEmailResult:
        """Send a transactional email.

        :param to: Recipient address.
        :param subject: Subject line.
        :param html: HTML body.
        :param text: Plain text body.
        :param from_address: Sender; defaults to the configured from address.
        :param reply_to: Reply-To address.
        :returns: Result with the sent email ID.
        :raises ValueError: If neither html nor text is given.
        :raises EmailServiceError: If the service is not configured or the call fails.
        """
        if not html and not text:
            raise ValueError("Either html or text content is required")

        client = self._require_client()

        try:
            email_id = client.send_email(
                from_address=from_address or self._config.from_address,
                to=to,
                subject=subject,
                html=html,
                text=text,
                reply_to=reply_to,
            )
        except ResendClientError as e:
            raise EmailServiceError(f"Failed to send email: {e.message}") from e

        logger.info(f"Email sent: email_id={email_id}")
        return SendEmailResult(email_id=email_id)


def get_email_service() -> EmailService:
    """Create an EmailService from the cached configuration and client.

    :returns: EmailService, unconfigured when RESEND_API_KEY is not set.
    """
    config = get_email_config()
    validation = config.validate_config()
    if not validation.valid:
        logger.warning(f"Email service unavailable: {validation.error}")
        return EmailService(client=None, config=config)

    return EmailService(client=get_resend_client(config.api_key), config=config)  # type: ignore[arg-type]
