from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotel_booking.models import Enrollment
from hotel_booking.repositories.interfaces import EnrollmentRepository


class SqlAlchemyEnrollmentRepository(EnrollmentRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_with_address_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        result = await self.db.execute(
            select(Enrollment)
            .where(Enrollment.user_id == user_id)
            .options(selectinload(Enrollment.address))
        )
        return result.scalar_one_or_none()
