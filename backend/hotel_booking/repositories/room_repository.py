from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.models import Room
from hotel_booking.repositories.interfaces import RoomRepository


class SqlAlchemyRoomRepository(RoomRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, room_id: int, for_update: bool = False) -> Optional[Room]:
        query = select(Room).where(Room.id == room_id)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()
