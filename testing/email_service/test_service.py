"""Tests for the email service layer."""

import unittest
from unittest.mock import MagicMock, patch

from src.email_service.config import EmailConfig
from src.email_service.exceptions import EmailErrorReason, EmailServiceError, ResendClientError
from src.email_service.service import EmailService, get_email_service


def _config(**overrides: str) -> EmailConfig:
    values = {
        "api_key": "re_test_key",
        "audience_id": "aud-123",
        "from_address": "Easy Plant Life <hello@easyplantlife.com>",
        "contact_email": "owner@easyplantlife.com",
    }
    values.update(overrides)
    return EmailConfig(_env_file=None, **values)  # type: ignore[arg-type]


class TestAddToNewsletter(unittest.TestCase):
    """Tests for EmailService.add_to_newsletter."""

    def setUp(self) -> None:
        """Set up a service with a mocked client."""
        self.client = MagicMock()
        self.service = EmailService(client=self.client, config=_config())

    def test_success_returns_contact_id(self) -> None:
        """Test that a created contact is returned as a result model."""
        self.client.create_contact.return_value = "contact-123"

        result = self.service.add_to_newsletter("jane@example.com", first_name="Jane")

        self.assertTrue(result.success)
        self.assertEqual(result.contact_id, "contact-123")
        self.client.create_contact.assert_called_once_with(
            audience_id="aud-123", email="jane@example.com", first_name="Jane"
        )

    def test_first_name_omitted_when_not_given(self) -> None:
        """Test that no first name is forwarded when absent."""
        self.client.create_contact.return_value = "contact-123"

        self.service.add_to_newsletter("jane@example.com")

        self.assertIsNone(self.client.create_contact.call_args.kwargs["first_name"])

    def test_provider_error_is_wrapped(self) -> None:
        """Test that provider errors become EmailServiceError with a prefix."""
        self.client.create_contact.side_effect = ResendClientError(
            "Invalid audience", status_code=422
        )

        with self.assertRaises(EmailServiceError) as ctx:
            self.service.add_to_newsletter("jane@example.com")

        self.assertEqual(
            ctx.exception.message, "Failed to add contact to newsletter: Invalid audience"
        )
        self.assertEqual(ctx.exception.reason, EmailErrorReason.REQUEST_FAILED)
        self.assertIsInstance(ctx.exception.__cause__, ResendClientError)

    def test_network_error_is_wrapped(self) -> None:
        """Test that network failures keep the underlying message."""
        self.client.create_contact.side_effect = ResendClientError(
            "Resend API request timed out after 30s"
        )

        with self.assertRaises(EmailServiceError) as ctx:
            self.service.add_to_newsletter("jane@example.com")

        self.assertIn("timed out", ctx.exception.message)
        self.assertTrue(ctx.exception.message.startswith("Failed to add contact to newsletter: "))

    def test_not_configured_raises_before_any_call(self) -> None:
        """Test that a missing client fails without a network call."""
        service = EmailService(client=None, config=_config(api_key=""))

        with self.assertRaises(EmailServiceError) as ctx:
            service.add_to_newsletter("jane@example.com")

        self.assertEqual(ctx.exception.message, "Email service not configured")
        self.assertEqual(ctx.exception.reason, EmailErrorReason.NOT_CONFIGURED)
        self.assertTrue(ctx.exception.is_configuration_error)

    def test_duplicate_signup_is_not_special_cased(self) -> None:
        """Test that repeated signups both succeed."""
        self.client.create_contact.return_value = "contact-123"

        first = self.service.add_to_newsletter("jane@example.com")
        second = self.service.add_to_newsletter("jane@example.com")

        self.assertEqual(first, second)
        self.assertEqual(self.client.create_contact.call_count, 2)


class TestSendEmail(unittest.TestCase):
    """Tests for EmailService.send_email."""

    def setUp(self) -> None:
        """Set up a service with a mocked client."""
        self.client = MagicMock()
        self.service = EmailService(client=self.client, config=_config())

    def test_success_uses_default_from_address(self) -> None:
        """Test that the configured sender is used when none is given."""
        self.client.send_email.return_value = "email-456"

        result = self.service.send_email(
            "owner@example.com", "Subject", html="<p>Hi</p>", reply_to="v@example.com"
        )

        self.assertEqual(result.email_id, "email-456")
        kwargs = self.client.send_email.call_args.kwargs
        self.assertEqual(kwargs["from_address"], "Easy Plant Life <hello@easyplantlife.com>")
        self.assertEqual(kwargs["to"], "owner@example.com")
        self.assertEqual(kwargs["reply_to"], "v@example.com")

    def test_custom_from_address(self) -> None:
        """Test that an explicit sender overrides the default."""
        self.client.send_email.return_value = "email-456"

        self.service.send_email("owner@example.com", "Subject", text="Hi", from_address="a@b.co")

        self.assertEqual(self.client.send_email.call_args.kwargs["from_address"], "a@b.co")

    def test_requires_html_or_text(self) -> None:
        """Test that a message without content is rejected."""
        with self.assertRaises(ValueError):
            self.service.send_email("owner@example.com", "Subject")

        self.client.send_email.assert_not_called()

    def test_provider_error_is_wrapped(self) -> None:
        """Test that provider errors use the send prefix."""
        self.client.send_email.side_effect = ResendClientError("Domain not verified")

        with self.assertRaises(EmailServiceError) as ctx:
            self.service.send_email("owner@example.com", "Subject", text="Hi")

        self.assertEqual(ctx.exception.message, "Failed to send email: Domain not verified")

    def test_not_configured(self) -> None:
        """Test that sending without a client fails as not configured."""
        service = EmailService(client=None, config=_config(api_key=""))

        with self.assertRaises(EmailServiceError) as ctx:
            service.send_email("owner@example.com", "Subject", text="Hi")

        self.assertEqual(ctx.exception.reason, EmailErrorReason.NOT_CONFIGURED)


class TestGetEmailService(unittest.TestCase):
    """Tests for the get_email_service dependency."""

    @patch("src.email_service.service.get_resend_client")
    @patch("src.email_service.service.get_email_config")
    def test_configured_service(self, mock_config: MagicMock, mock_client: MagicMock) -> None:
        """Test that a configured key yields a usable service."""
        mock_config.return_value = _config()

        service = get_email_service()

        self.assertTrue(service.is_configured)
        mock_client.assert_called_once_with("re_test_key")

    @patch("src.email_service.service.get_resend_client")
    @patch("src.email_service.service.get_email_config")
    def test_unconfigured_service(self, mock_config: MagicMock, mock_client: MagicMock) -> None:
        """Test that a missing key yields an unconfigured service."""
        mock_config.return_value = _config(api_key="")

        service = get_email_service()

        self.assertFalse(service.is_configured)
        mock_client.assert_not_called()


if __name__ == "__main__":
    unittest.main()
