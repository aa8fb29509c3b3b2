"""
Booking service: read, create and change a user's hotel room booking.

RULES
=====

Create and update run the same two checks, in this order:
  1. Eligibility - enrollment with address, paid in-person ticket with hotel
  2. Availability - room exists and bookings < capacity

Eligibility failures therefore win over capacity failures.

CONCURRENCY
===========

The availability check reads the room with SELECT ... FOR UPDATE, so the
count and the insert/update that follows happen while the room row is
locked. Two requests racing for the last bed in a room serialize on that
lock; the second one sees the first one's booking in its count.

A user holds at most one booking (unique constraint on bookings.user_id).
Creating a second one is rejected as an invalid request.
"""

from contextlib import contextmanager

from hotel_booking.core.exceptions import (
    BookingError,
    InvalidBookingError,
    NotFoundError,
    UnauthorizedError,
)
from hotel_booking.core.logging import get_logger
from hotel_booking.core.metrics import booking_latency, record_booking_attempt
from hotel_booking.models import Booking
from hotel_booking.repositories.interfaces import (
    BookingRepository,
    EnrollmentRepository,
    RoomRepository,
    TicketRepository,
)
from hotel_booking.services.availability_service import check_room_availability
from hotel_booking.services.eligibility_service import check_eligibility

logger = get_logger(__name__)


@contextmanager
def _instrumented(operation: str):
    with booking_latency.labels(operation=operation).time():
        try:
            yield
        except BookingError as e:
            record_booking_attempt(operation, e.kind.value)
            raise
        except Exception:
            record_booking_attempt(operation, "error")
            raise
    record_booking_attempt(operation, "success")


class BookingService:

    def __init__(
        self,
        bookings: BookingRepository,
        rooms: RoomRepository,
        enrollments: EnrollmentRepository,
        tickets: TicketRepository,
    ):
        self.bookings = bookings
        self.rooms = rooms
        self.enrollments = enrollments
        self.tickets = tickets

    async def _validate(self, user_id: int, room_id: int) -> None:
        await check_eligibility(self.enrollments, self.tickets, user_id)
        await check_room_availability(self.rooms, self.bookings, room_id, lock=True)

    async def get_booking(self, user_id: int) -> Booking:
        """Return the user's booking with its room loaded."""
        with _instrumented("read"):
            booking = await self.bookings.find_by_user_id(user_id)
            if booking is None:
                raise NotFoundError("Booking not found")
            return booking

    async def create_booking(self, user_id: int, room_id: int) -> int:
        """Book room_id for the user and return the new booking id."""
        with _instrumented("create"):
            await self._validate(user_id, room_id)

            if await self.bookings.find_by_user_id(user_id) is not None:
                logger.info("booking_rejected", user_id=user_id, reason="already_booked")
                raise InvalidBookingError("User already holds a booking")

            booking = await self.bookings.create(user_id, room_id)

            logger.info("booking_created", booking_id=booking.id, user_id=user_id, room_id=room_id)
            return booking.id

    async def update_booking(self, user_id: int, room_id: int, booking_id: int) -> int:
        """
        Move the user's booking to room_id, keeping its id.

        booking_id is the booking the caller claims to own; anything other
        than their own booking is rejected.
        """
        with _instrumented("update"):
            await self._validate(user_id, room_id)

            booking = await self.bookings.find_by_user_id(user_id)
            if booking is None or booking.id != booking_id:
                logger.info(
                    "booking_rejected",
                    user_id=user_id,
                    booking_id=booking_id,
                    reason="not_owner",
                )
                raise UnauthorizedError("Booking does not belong to user")

            previous_room_id = booking.room_id
            await self.bookings.update_room(booking.id, room_id)

            logger.info(
                "booking_room_changed",
                booking_id=booking.id,
                user_id=user_id,
                from_room_id=previous_room_id,
                to_room_id=room_id,
            )
            return booking.id
