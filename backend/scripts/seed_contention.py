"""
Seed data for the Locust contention scenario.

Creates one hotel room with the given capacity and N attendees holding paid
in-person hotel tickets, each with a session. Prints the room id followed by
one bearer token per line.
"""

import argparse
import asyncio
from datetime import datetime, timezone
from uuid import uuid4

from hotel_booking.core.security import create_access_token
from hotel_booking.db.session import AsyncSessionLocal
from hotel_booking.models import (
    Address,
    Enrollment,
    Hotel,
    Room,
    Session,
    Ticket,
    TicketStatus,
    TicketType,
    User,
)


async def seed(users: int, capacity: int) -> None:
    async with AsyncSessionLocal() as db:
        hotel = Hotel(name="Load Test Hotel", image="https://example.com/hotel.png")
        db.add(hotel)
        await db.flush()

        room = Room(name="Contended", capacity=capacity, hotel_id=hotel.id)
        ticket_type = TicketType(name="Presencial + Hotel", price=600, is_remote=False, includes_hotel=True)
        db.add_all([room, ticket_type])
        await db.flush()

        tokens = []
        for _ in range(users):
            user = User(email=f"load_{uuid4().hex[:10]}@test.com")
            db.add(user)
            await db.flush()

            enrollment = Enrollment(
                name="Load Tester",
                cpf="000.000.000-00",
                birthday=datetime(1990, 1, 1, tzinfo=timezone.utc),
                phone="(00) 00000-0000",
                user_id=user.id,
            )
            db.add(enrollment)
            await db.flush()

            token = create_access_token(data={"sub": str(user.id)})
            db.add_all([
                Address(
                    cep="00000-000", street="Rua", city="Cidade", state="RJ",
                    number="1", neighborhood="Centro", enrollment_id=enrollment.id,
                ),
                Ticket(enrollment_id=enrollment.id, ticket_type_id=ticket_type.id, status=TicketStatus.PAID),
                Session(user_id=user.id, token=token),
            ])
            tokens.append(token)

        await db.commit()

    print(room.id)
    for token in tokens:
        print(token)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--users", type=int, default=100)
    parser.add_argument("--capacity", type=int, default=3)
    args = parser.parse_args()
    asyncio.run(seed(args.users, args.capacity))


if __name__ == "__main__":
    main()
