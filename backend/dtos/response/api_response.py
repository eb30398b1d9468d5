"""
Error Response DTOs

Uniform error bodies returned by every endpoint.
"""

from pydantic import Field
from typing import List, Optional

from constants import HTTPStatus
from .product_response import CamelModel


_DEFAULT_MESSAGES = {
    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.UNAUTHORIZED: "Unauthorized",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
}


def default_message(status_code: int) -> Optional[str]:
    """Standard message for a status code, or None if there is none."""
    return _DEFAULT_MESSAGES.get(status_code)


class ApiResponse(CamelModel):
    """Status code plus a human-readable message."""

    status_code: int
    message: Optional[str] = None

    @classmethod
    def for_status(cls, status_code: int, message: Optional[str] = None) -> "ApiResponse":
        return cls(status_code=status_code, message=message or default_message(status_code))


class ApiExceptionResponse(ApiResponse):
    """Unhandled server error; details carries the traceback in development."""

    details: Optional[str] = None

    @classmethod
    def for_exception(cls, message: Optional[str], details: Optional[str] = None) -> "ApiExceptionResponse":
        return cls(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=message or default_message(HTTPStatus.INTERNAL_SERVER_ERROR),
            details=details,
        )


class ApiValidationErrorResponse(ApiResponse):
    """Request validation failure with one entry per invalid field."""

    status_code: int = HTTPStatus.BAD_REQUEST
    message: Optional[str] = default_message(HTTPStatus.BAD_REQUEST)
    errors: List[str] = Field(default_factory=list)
