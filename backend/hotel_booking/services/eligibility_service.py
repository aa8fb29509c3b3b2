"""
Eligibility check: may this user hold a hotel room at all?

A user qualifies when their enrollment (with address) has a ticket that is
paid, for in-person attendance, and of a type that includes hotel.
"""

from typing import Optional

from hotel_booking.core.exceptions import NotFoundError, UnauthorizedError
from hotel_booking.core.logging import get_logger
from hotel_booking.models import Ticket, TicketStatus
from hotel_booking.repositories.interfaces import EnrollmentRepository, TicketRepository

logger = get_logger(__name__)


def ticket_rejection_reason(ticket: Optional[Ticket]) -> Optional[str]:
    """Return why the ticket does not entitle a room, or None when it does."""
    if ticket is None:
        return "no_ticket"
    if ticket.status != TicketStatus.PAID:
        return "ticket_not_paid"
    if ticket.ticket_type.is_remote:
        return "ticket_remote"
    if not ticket.ticket_type.includes_hotel:
        return "ticket_without_hotel"
    return None


async def check_eligibility(
    enrollments: EnrollmentRepository,
    tickets: TicketRepository,
    user_id: int,
) -> None:
    """
    Raise unless the user may book a room.

    NotFoundError when the user has no enrollment with an address,
    UnauthorizedError when the ticket is missing or does not qualify.
    """
    enrollment = await enrollments.find_with_address_by_user_id(user_id)
    if enrollment is None or enrollment.address is None:
        logger.info("booking_rejected", user_id=user_id, reason="no_enrollment")
        raise NotFoundError("Enrollment not found")

    ticket = await tickets.find_by_enrollment_id(enrollment.id)
    reason = ticket_rejection_reason(ticket)
    if reason:
        logger.info("booking_rejected", user_id=user_id, reason=reason)
        raise UnauthorizedError("Ticket does not include a hotel reservation")
