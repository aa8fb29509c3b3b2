"""
FastAPI dependencies wiring the booking service to the request session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.db.session import get_db
from hotel_booking.repositories import (
    SqlAlchemyBookingRepository,
    SqlAlchemyEnrollmentRepository,
    SqlAlchemyRoomRepository,
    SqlAlchemyTicketRepository,
)
from hotel_booking.services.booking_service import BookingService


def get_booking_service(db: AsyncSession = Depends(get_db)) -> BookingService:
    return BookingService(
        bookings=SqlAlchemyBookingRepository(db),
        rooms=SqlAlchemyRoomRepository(db),
        enrollments=SqlAlchemyEnrollmentRepository(db),
        tickets=SqlAlchemyTicketRepository(db),
    )
