"""Resend API client for audience contacts and transactional email."""

import logging
from functools import lru_cache
from typing import Any

import requests

from src.email_service.exceptions import ResendClientError

logger = logging.getLogger(__name__)

# Resend API timeout in seconds
REQUEST_TIMEOUT = 30


class ResendClient:
    """Client for the Resend REST API.

    Holds no per-request state, so a single instance can be shared between
    concurrent requests.
    """

    BASE_URL = "https://api.resend.com"

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        timeout: int = REQUEST_TIMEOUT,
    ) -> None:
        """Initialise the Resend client.

        :param api_key: Resend API key.
        :param base_url: Override for the API base URL.
        :param timeout: Request timeout in seconds.
        :raises ValueError: If the API key is missing or blank.
        """
        if not api_key or not api_key.strip():
            raise ValueError("Resend API key not provided. Set RESEND_API_KEY environment variable.")

        self._api_key = api_key.strip()
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._timeout = timeout

        logger.debug("ResendClient initialised")

    @property
    def _headers(self) -> dict[str, str]:
        """Headers for Resend API requests.

        :returns: Dictionary of required headers.
        """
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def _post(self, endpoint: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Make a POST request to the Resend API.

        :param endpoint: API endpoint path (without base URL).
        :param payload: Request body as dictionary.
        :returns: JSON response as dictionary.
        :raises ResendClientError: If the request fails.
        """
        url = f"{self._base_url}/{endpoint}"
        logger.debug(f"Making POST request to endpoint={endpoint}")

        try:
            response = requests.post(
                url,
                headers=self._headers,
                json=payload,
                timeout=self._timeout,
            )
            response.raise_for_status()
            return response.json()

        except requests.exceptions.Timeout as e:
            raise ResendClientError(f"Resend API request timed out after {self._timeout}s") from e
        except requests.exceptions.HTTPError as e:
            raise ResendClientError(
                self._extract_error_message(e.response),
                status_code=e.response.status_code,
            ) from e
        except requests.exceptions.JSONDecodeError as e:
            raise ResendClientError("Resend API returned an invalid JSON response") from e
        except requests.exceptions.RequestException as e:
            raise ResendClientError(f"Resend API request failed: {e}") from e

    def _extract_error_message(self, response: requests.Response) -> str:
        """Extract the error message from a Resend error response.

        Resend errors look like ``{"statusCode": 422, "name": "...", "message": "..."}``.

        :param response: Response object from failed request.
        :returns: Error message string.
        """
        try:
            data = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"

        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return response.text or f"HTTP {response.status_code}"

    @staticmethod
    def _require_id(data: dict[str, Any]) -> str:
        """Return the ``id`` field of a Resend response.

        :raises ResendClientError: If the response carries no id.
        """
        resource_id = data.get("id") if isinstance(data, dict) else None
        if not resource_id:
            raise ResendClientError("Resend API response missing id")
        return str(resource_id)

    def create_contact(
        self,
        *,
        audience_id: str,
        email: str,
        first_name: str | None = None,
    ) -> str:
        """Add a contact to an audience.

        Resend answers with success when the contact already exists.

        :param audience_id: Resend audience ID.
        :param email: Contact email address.
        :param first_name: Optional first name for personalisation.
        :returns: The contact ID.
        :raises ResendClientError: If the request fails.
        """
        payload: dict[str, Any] = {"email": email, "unsubscribed": False}
        if first_name:
            payload["first_name"] = first_name

        logger.info(f"Creating contact in audience: {audience_id}")
        data = self._post(f"audiences/{audience_id}/contacts", payload)
        return self._require_id(data)

    def send_email(
        self,
        *,
        from_address: str,
        to: str | list[str],
        subject: str,
        html: str | None = None,
        text: str | None = None,
        reply_to: str | None = None,
    ) -> str:
        """Send a transactional email.

        :param from_address: Sender, e.g. ``"Name <sender@example.com>"``.
        :param to: Recipient address or list of addresses.
        :param subject: Subject line.
        :param html: HTML body.
        :param text: Plain text body.
        :param reply_to: Reply-To address.
        :returns: The sent email ID.
        :raises ResendClientError: If the request fails.
        """
        payload: dict[str, Any] = {
            "from": from_address,
            "to": to,
            "subject": subject,
        }
        if html:
            payload["html"] = html
        if text:
            payload["text"] = text
        if reply_to:
            payload["reply_to"] = reply_to

        logger.info("Sending email via Resend")
        data = self._post("emails", payload)
        return self._require_id(data)


@lru_cache
def get_resend_client(api_key: str) -> ResendClient:
    """Get the process-wide Resend client for an API key.

    Built on first use and reused afterwards. A race on first use can at worst
    build a second, equivalent client.

    :param api_key: Resend API key.
    :returns: Shared ResendClient instance.
    :raises ValueError: If the API key is blank.
    """
    return ResendClient(api_key)
