"""
Data-access contracts the booking rules depend on.

The services only ever see these interfaces, so the SQLAlchemy
implementations can be swapped for in-memory ones in tests.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hotel_booking.models import Booking, Enrollment, Room, Ticket


class EnrollmentRepository(ABC):

    @abstractmethod
    async def find_with_address_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        """Return the user's enrollment with its address loaded, or None."""


class TicketRepository(ABC):

    @abstractmethod
    async def find_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        """Return the enrollment's ticket with its ticket type loaded, or None."""


class RoomRepository(ABC):

    @abstractmethod
    async def find_by_id(self, room_id: int, for_update: bool = False) -> Optional[Room]:
        """
        Return the room, or None.

        With for_update=True the room row stays locked until the current
        transaction ends, serializing bookings against the same room.
        """


class BookingRepository(ABC):

    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> Optional[Booking]:
        """Return the user's booking with its room loaded, or None."""

    @abstractmethod
    async def count_by_room_id(self, room_id: int) -> int:
        pass

    @abstractmethod
    async def create(self, user_id: int, room_id: int) -> Booking:
        pass

    @abstractmethod
    async def update_room(self, booking_id: int, room_id: int) -> Booking:
        pass
