"""
Domain errors raised by the booking rules.

Every error carries an explicit ``kind``. The HTTP layer maps the kind to a
status code; nothing compares errors by class name or message.
"""

from enum import Enum
from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    INVALID = "invalid"


STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.INVALID: status.HTTP_400_BAD_REQUEST,
}


class BookingError(Exception):
    """Base class for the closed set of booking errors."""

    kind: ErrorKind = ErrorKind.INVALID
    default_message = "Booking request could not be processed"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_http_exception(self) -> HTTPException:
        return HTTPException(
            status_code=self.status_code,
            detail={
                "message": self.message,
                "kind": self.kind.value,
            },
        )


class NotFoundError(BookingError):
    """The referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND
    default_message = "No result for this search!"


class UnauthorizedError(BookingError):
    """The entity exists but the caller is not entitled to act on it.

    Covers ineligible tickets, exhausted room capacity and booking ownership
    mismatches.
    """

    kind = ErrorKind.UNAUTHORIZED
    default_message = "You must be signed in to continue"


class InvalidBookingError(BookingError):
    kind = ErrorKind.INVALID
