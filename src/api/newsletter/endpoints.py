"""Newsletter signup endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse, SuccessResponse, error_response, success_response
from src.api.newsletter.models import NewsletterSignupRequest, NewsletterSubmission
from src.api.validation import (
    INVALID_BODY_MESSAGE,
    SubmissionValidationError,
    clean_text,
    normalise_email,
    read_json_object,
)
from src.email_service import EmailService, EmailServiceError, get_email_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/newsletter", tags=["Newsletter"])

SUBSCRIBED_MESSAGE = "Successfully subscribed to the newsletter"
SUBSCRIBE_FAILED_MESSAGE = "Unable to subscribe. Please try again later."


def validate_newsletter_submission(body: dict[str, Any]) -> NewsletterSubmission:
    """Validate and normalise a newsletter signup body.

    :param body: Decoded JSON body.
    :returns: The normalised submission.
    :raises SubmissionValidationError: If the email is missing or malformed.
    """
    email = normalise_email(body.get("email"))
    return NewsletterSubmission(email=email, first_name=clean_text(body.get("firstName")))


@router.post(
    "",
    response_model=SuccessResponse,
    summary="Subscribe to the newsletter",
    description="Adds an email address to the newsletter audience.",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid submission"},
        500: {"model": ErrorResponse, "description": "Email service failure"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": NewsletterSignupRequest.model_json_schema()}},
        }
    },
)
def subscribe(
    body: dict[str, Any] | None = Depends(read_json_object),
    email_service: EmailService = Depends(get_email_service),
) -> JSONResponse:
    """Subscribe a visitor to the newsletter.

    Signing up an address that is already subscribed succeeds as normal.

    :param body: Decoded JSON body, None if it was not valid JSON.
    :param email_service: Email service used to add the contact.
    :returns: JSON response in the form contract.
    """
    if body is None:
        return error_response(400, INVALID_BODY_MESSAGE)

    try:
        submission = validate_newsletter_submission(body)
    except SubmissionValidationError as e:
        logger.info(f"Newsletter signup rejected: {e.message}")
        return error_response(400, e.message)

    try:
        result = email_service.add_to_newsletter(submission.email, first_name=submission.first_name)
    except EmailServiceError as e:
        logger.error(f"Newsletter signup failed: reason={e.reason}, error={e.message}")
        return error_response(500, SUBSCRIBE_FAILED_MESSAGE)
    except Exception:
        logger.exception("Unexpected error during newsletter signup")
        return error_response(500, SUBSCRIBE_FAILED_MESSAGE)

    logger.info(f"Newsletter signup complete: contact_id={result.contact_id}")
    return success_response(SUBSCRIBED_MESSAGE)
