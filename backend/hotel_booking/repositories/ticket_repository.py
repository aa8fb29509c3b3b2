from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotel_booking.models import Ticket
from hotel_booking.repositories.interfaces import TicketRepository


class SqlAlchemyTicketRepository(TicketRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        result = await self.db.execute(
            select(Ticket)
            .where(Ticket.enrollment_id == enrollment_id)
            .options(selectinload(Ticket.ticket_type))
            .order_by(Ticket.id)
            .limit(1)
        )
        return result.scalar_one_or_none()
