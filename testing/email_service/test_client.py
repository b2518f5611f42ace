"""Tests for Resend client module."""

import unittest
from unittest.mock import MagicMock, patch

import requests

from src.email_service.client import REQUEST_TIMEOUT, ResendClient, get_resend_client
from src.email_service.exceptions import ResendClientError


def _ok_response(payload: dict) -> MagicMock:
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = payload
    return response


def _error_response(status_code: int, payload: dict | None = None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if payload is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = payload
    response.raise_for_status.side_effect = requests.exceptions.HTTPError(response=response)
    return response


class TestResendClientInitialisation(unittest.TestCase):
    """Tests for ResendClient initialisation."""

    def test_initialisation_with_api_key(self) -> None:
        """Test successful initialisation."""
        client = ResendClient("re_test_key")

        self.assertEqual(client._api_key, "re_test_key")
        self.assertEqual(client._base_url, "https://api.resend.com")
        self.assertEqual(client._timeout, REQUEST_TIMEOUT)

    def test_initialisation_strips_api_key(self) -> None:
        """Test that surrounding whitespace is removed from the key."""
        client = ResendClient("  re_test_key \n")

        self.assertEqual(client._headers["Authorization"], "Bearer re_test_key")

    def test_blank_api_key_raises_value_error(self) -> None:
        """Test that a blank key is rejected."""
        for api_key in ("", "   "):
            with self.subTest(api_key=api_key), self.assertRaises(ValueError) as ctx:
                ResendClient(api_key)
            self.assertIn("RESEND_API_KEY", str(ctx.exception))

    def test_custom_base_url_trailing_slash_removed(self) -> None:
        """Test that a custom base URL is normalised."""
        client = ResendClient("re_test_key", base_url="http://localhost:9000/")

        self.assertEqual(client._base_url, "http://localhost:9000")


class TestResendClientCreateContact(unittest.TestCase):
    """Tests for ResendClient.create_contact."""

    def setUp(self) -> None:
        """Set up client."""
        self.client = ResendClient("re_test_key")

    @patch("src.email_service.client.requests.post")
    def test_create_contact_success(self, mock_post: MagicMock) -> None:
        """Test contact creation returns the contact ID."""
        mock_post.return_value = _ok_response({"object": "contact", "id": "contact-123"})

        contact_id = self.client.create_contact(
            audience_id="aud-1", email="jane@example.com", first_name="Jane"
        )

        self.assertEqual(contact_id, "contact-123")
        mock_post.assert_called_once()
        self.assertEqual(
            mock_post.call_args.args[0], "https://api.resend.com/audiences/aud-1/contacts"
        )
        payload = mock_post.call_args.kwargs["json"]
        self.assertEqual(payload["email"], "jane@example.com")
        self.assertEqual(payload["first_name"], "Jane")
        self.assertFalse(payload["unsubscribed"])
        self.assertEqual(mock_post.call_args.kwargs["timeout"], REQUEST_TIMEOUT)
        self.assertEqual(
            mock_post.call_args.kwargs["headers"]["Authorization"], "Bearer re_test_key"
        )

    @patch("src.email_service.client.requests.post")
    def test_create_contact_omits_missing_first_name(self, mock_post: MagicMock) -> None:
        """Test that first_name is only sent when given."""
        mock_post.return_value = _ok_response({"id": "contact-123"})

        self.client.create_contact(audience_id="aud-1", email="jane@example.com")

        self.assertNotIn("first_name", mock_post.call_args.kwargs["json"])

    @patch("src.email_service.client.requests.post")
    def test_create_contact_provider_error_uses_provider_message(
        self, mock_post: MagicMock
    ) -> None:
        """Test that a structured Resend error surfaces its message."""
        mock_post.return_value = _error_response(
            422,
            {"statusCode": 422, "name": "validation_error", "message": "Invalid audience"},
        )

        with self.assertRaises(ResendClientError) as ctx:
            self.client.create_contact(audience_id="bad", email="jane@example.com")

        self.assertEqual(ctx.exception.message, "Invalid audience")
        self.assertEqual(ctx.exception.status_code, 422)

    @patch("src.email_service.client.requests.post")
    def test_error_without_json_body_uses_text(self, mock_post: MagicMock) -> None:
        """Test that a non-JSON error body falls back to the raw text."""
        mock_post.return_value = _error_response(502, None, text="Bad Gateway")

        with self.assertRaises(ResendClientError) as ctx:
            self.client.create_contact(audience_id="aud-1", email="jane@example.com")

        self.assertEqual(ctx.exception.message, "Bad Gateway")
        self.assertEqual(ctx.exception.status_code, 502)

    @patch("src.email_service.client.requests.post")
    def test_timeout_raises_client_error(self, mock_post: MagicMock) -> None:
        """Test that timeouts are wrapped."""
        mock_post.side_effect = requests.exceptions.Timeout()

        with self.assertRaises(ResendClientError) as ctx:
            self.client.create_contact(audience_id="aud-1", email="jane@example.com")

        self.assertIn("timed out", str(ctx.exception))
        self.assertIsNone(ctx.exception.status_code)

    @patch("src.email_service.client.requests.post")
    def test_connection_error_raises_client_error(self, mock_post: MagicMock) -> None:
        """Test that transport failures are wrapped."""
        mock_post.side_effect = requests.exceptions.ConnectionError("Connection refused")

        with self.assertRaises(ResendClientError) as ctx:
            self.client.create_contact(audience_id="aud-1", email="jane@example.com")

        self.assertIn("Connection refused", str(ctx.exception))

    @patch("src.email_service.client.requests.post")
    def test_non_json_success_response_raises_client_error(self, mock_post: MagicMock) -> None:
        """Test that a success response with an unparseable body is reported as invalid JSON."""
        response = MagicMock()
        response.status_code = 200
        response.json.side_effect = requests.exceptions.JSONDecodeError(
            "Expecting value", "<html>", 0
        )
        mock_post.return_value = response

        with self.assertRaises(ResendClientError) as ctx:
            self.client.create_contact(audience_id="aud-1", email="jane@example.com")

        self.assertEqual(ctx.exception.message, "Resend API returned an invalid JSON response")
        self.assertIsNone(ctx.exception.status_code)

    @patch("src.email_service.client.requests.post")
    def test_response_without_id_raises_client_error(self, mock_post: MagicMock) -> None:
        """Test that a success response lacking an id is treated as an error."""
        mock_post.return_value = _ok_response({"object": "contact"})

        with self.assertRaises(ResendClientError) as ctx:
            self.client.create_contact(audience_id="aud-1", email="jane@example.com")

        self.assertIn("missing id", str(ctx.exception))


class TestResendClientSendEmail(unittest.TestCase):
    """Tests for ResendClient.send_email."""

    def setUp(self) -> None:
        """Set up client."""
        self.client = ResendClient("re_test_key")

    @patch("src.email_service.client.requests.post")
    def test_send_email_success(self, mock_post: MagicMock) -> None:
        """Test sending returns the email ID and posts the full payload."""
        mock_post.return_value = _ok_response({"id": "email-456"})

        email_id = self.client.send_email(
            from_address="Site <hello@example.com>",
            to="owner@example.com",
            subject="Hello",
            html="<p>Hi</p>",
            text="Hi",
            reply_to="visitor@example.com",
        )

        self.assertEqual(email_id, "email-456")
        self.assertEqual(mock_post.call_args.args[0], "https://api.resend.com/emails")
        payload = mock_post.call_args.kwargs["json"]
        self.assertEqual(payload["from"], "Site <hello@example.com>")
        self.assertEqual(payload["to"], "owner@example.com")
        self.assertEqual(payload["subject"], "Hello")
        self.assertEqual(payload["html"], "<p>Hi</p>")
        self.assertEqual(payload["text"], "Hi")
        self.assertEqual(payload["reply_to"], "visitor@example.com")

    @patch("src.email_service.client.requests.post")
    def test_send_email_omits_optional_fields(self, mock_post: MagicMock) -> None:
        """Test that unset optional fields are not sent."""
        mock_post.return_value = _ok_response({"id": "email-456"})

        self.client.send_email(
            from_address="hello@example.com",
            to="owner@example.com",
            subject="Hello",
            text="Hi",
        )

        payload = mock_post.call_args.kwargs["json"]
        self.assertNotIn("html", payload)
        self.assertNotIn("reply_to", payload)

    @patch("src.email_service.client.requests.post")
    def test_send_email_provider_error(self, mock_post: MagicMock) -> None:
        """Test that Resend errors are raised as ResendClientError."""
        mock_post.return_value = _error_response(
            403, {"statusCode": 403, "message": "Domain not verified"}
        )

        with self.assertRaises(ResendClientError) as ctx:
            self.client.send_email(
                from_address="hello@example.com", to="owner@example.com", subject="Hi", text="Hi"
            )

        self.assertEqual(ctx.exception.message, "Domain not verified")


class TestGetResendClient(unittest.TestCase):
    """Tests for the cached client accessor."""

    def setUp(self) -> None:
        """Clear the accessor cache."""
        get_resend_client.cache_clear()

    def tearDown(self) -> None:
        """Clear the accessor cache."""
        get_resend_client.cache_clear()

    def test_same_key_returns_same_instance(self) -> None:
        """Test that the client is built once per key."""
        first = get_resend_client("re_key_a")
        second = get_resend_client("re_key_a")

        self.assertIs(first, second)

    def test_different_key_returns_new_instance(self) -> None:
        """Test that a different key builds a separate client."""
        self.assertIsNot(get_resend_client("re_key_a"), get_resend_client("re_key_b"))


if __name__ == "__main__":
    unittest.main()
