from hotel_booking.repositories.interfaces import (
    BookingRepository,
    EnrollmentRepository,
    RoomRepository,
    TicketRepository,
)
from hotel_booking.repositories.booking_repository import SqlAlchemyBookingRepository
from hotel_booking.repositories.enrollment_repository import SqlAlchemyEnrollmentRepository
from hotel_booking.repositories.room_repository import SqlAlchemyRoomRepository
from hotel_booking.repositories.ticket_repository import SqlAlchemyTicketRepository

__all__ = [
    "BookingRepository", "EnrollmentRepository", "RoomRepository", "TicketRepository",
    "SqlAlchemyBookingRepository", "SqlAlchemyEnrollmentRepository",
    "SqlAlchemyRoomRepository", "SqlAlchemyTicketRepository",
]
