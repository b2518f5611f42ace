"""Pydantic models for API responses."""

from typing import Literal

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

API_VERSION = "0.1.0"


class SuccessResponse(BaseModel):
    """Standard success response for form submissions."""

    success: Literal[True] = True
    message: str | None = Field(default=None, description="Message shown to the visitor")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    success: Literal[False] = False
    error: str = Field(..., description="Error shown to the visitor")


def success_response(message: str | None = None) -> JSONResponse:
    """Build a 200 response in the form contract.

    :param message: Optional message for the visitor.
    :returns: JSON response.
    """
    return JSONResponse(
        status_code=200,
        content=SuccessResponse(message=message).model_dump(exclude_none=True),
    )


def error_response(status_code: int, error: str) -> JSONResponse:
    """Build an error response in the form contract.

    :param status_code: HTTP status code.
    :param error: Visitor-facing error message.
    :returns: JSON response.
    """
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error).model_dump(),
    )
