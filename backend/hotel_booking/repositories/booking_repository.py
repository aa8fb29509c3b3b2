"""
SQLAlchemy-backed booking repository.

Writes are flushed, not committed: the request-scoped session in
hotel_booking.db.session owns the transaction boundary.
"""

from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotel_booking.core.exceptions import InvalidBookingError, NotFoundError
from hotel_booking.core.logging import get_logger
from hotel_booking.models import Booking
from hotel_booking.repositories.interfaces import BookingRepository

logger = get_logger(__name__)


class SqlAlchemyBookingRepository(BookingRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_user_id(self, user_id: int) -> Optional[Booking]:
        result = await self.db.execute(
            select(Booking)
            .where(Booking.user_id == user_id)
            .options(selectinload(Booking.room))
            .order_by(Booking.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def count_by_room_id(self, room_id: int) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Booking).where(Booking.room_id == room_id)
        )
        return result.scalar_one()

    async def create(self, user_id: int, room_id: int) -> Booking:
        booking = Booking(user_id=user_id, room_id=room_id)
        self.db.add(booking)
        try:
            await self.db.flush()
        except IntegrityError as e:
            logger.warning("booking_insert_rejected", user_id=user_id, room_id=room_id, error=str(e.orig))
            raise InvalidBookingError("User already holds a booking") from e
        await self.db.refresh(booking)
        return booking

    async def update_room(self, booking_id: int, room_id: int) -> Booking:
        booking = await self.db.get(Booking, booking_id)
        if booking is None:
            raise NotFoundError(f"Booking {booking_id} not found")

        booking.room_id = room_id
        await self.db.flush()
        await self.db.refresh(booking)
        return booking
