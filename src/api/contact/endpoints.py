"""Contact form endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api.contact.formatter import format_contact_html, format_contact_text, format_subject
from src.api.contact.models import ContactRequest, ContactSubmission
from src.api.models import ErrorResponse, SuccessResponse, error_response, success_response
from src.api.validation import (
    INVALID_BODY_MESSAGE,
    SubmissionValidationError,
    clean_text,
    normalise_email,
    read_json_object,
)
from src.email_service import (
    EmailConfig,
    EmailService,
    EmailServiceError,
    get_email_config,
    get_email_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["Contact"])

HONEYPOT_FIELD = "website"

THANK_YOU_MESSAGE = "Thank you for your message. We will get back to you soon."
SEND_FAILED_MESSAGE = "Unable to send your message. Please try again later."
NAME_REQUIRED_MESSAGE = "Name is required"
MESSAGE_REQUIRED_MESSAGE = "Message is required"


def is_honeypot_filled(body: dict[str, Any]) -> bool:
    """Check whether the hidden honeypot field was filled in.

    :param body: Decoded JSON body.
    :returns: True if the submission came from a bot.
    """
    return clean_text(body.get(HONEYPOT_FIELD)) is not None


def validate_contact_submission(body: dict[str, Any]) -> ContactSubmission:
    """Validate and normalise a contact form body.

    Checks run in order name, email, email format, message; the first failure wins.

    :param body: Decoded JSON body.
    :returns: The normalised submission.
    :raises SubmissionValidationError: If a field is missing or malformed.
    """
    name = clean_text(body.get("name"))
    if name is None:
        raise SubmissionValidationError(NAME_REQUIRED_MESSAGE)

    email = normalise_email(body.get("email"))

    message = clean_text(body.get("message"))
    if message is None:
        raise SubmissionValidationError(MESSAGE_REQUIRED_MESSAGE)

    return ContactSubmission(name=name, email=email, message=message)


@router.post(
    "",
    response_model=SuccessResponse,
    summary="Send a contact message",
    description="Emails a contact form submission to the site owner.",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid submission"},
        500: {"model": ErrorResponse, "description": "Email service failure"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ContactRequest.model_json_schema()}},
        }
    },
)
def send_contact_message(
    body: dict[str, Any] | None = Depends(read_json_object),
    email_service: EmailService = Depends(get_email_service),
    email_config: EmailConfig = Depends(get_email_config),
) -> JSONResponse:
    """Forward a contact form submission to the site owner.

    Submissions with the honeypot field filled get the normal success
    response but are dropped.

    :param body: Decoded JSON body, None if it was not valid JSON.
    :param email_service: Email service used to send the message.
    :param email_config: Email configuration holding the recipient address.
    :returns: JSON response in the form contract.
    """
    if body is None:
        return error_response(400, INVALID_BODY_MESSAGE)

    if is_honeypot_filled(body):
        logger.info("Contact submission dropped: honeypot field filled")
        return success_response(THANK_YOU_MESSAGE)

    try:
        submission = validate_contact_submission(body)
    except SubmissionValidationError as e:
        logger.info(f"Contact submission rejected: {e.message}")
        return error_response(400, e.message)

    try:
        result = email_service.send_email(
            to=email_config.contact_email,
            subject=format_subject(submission),
            html=format_contact_html(submission),
            text=format_contact_text(submission),
            reply_to=submission.email,
        )
    except EmailServiceError as e:
        logger.error(f"Contact message failed: reason={e.reason}, error={e.message}")
        return error_response(500, SEND_FAILED_MESSAGE)
    except Exception:
        logger.exception("Unexpected error sending contact message")
        return error_response(500, SEND_FAILED_MESSAGE)

    logger.info(f"Contact message sent: email_id={result.email_id}")
    return success_response(THANK_YOU_MESSAGE)
