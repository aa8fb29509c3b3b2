"""
Room availability check: a room accepts another booking only while its
booking count is strictly below its capacity.
"""

from hotel_booking.core.exceptions import NotFoundError, UnauthorizedError
from hotel_booking.core.logging import get_logger
from hotel_booking.repositories.interfaces import BookingRepository, RoomRepository

logger = get_logger(__name__)


async def check_room_availability(
    rooms: RoomRepository,
    bookings: BookingRepository,
    room_id: int,
    lock: bool = False,
) -> None:
    """
    Raise NotFoundError for an unknown room and UnauthorizedError for a full one.

    Pass lock=True when a write follows in the same transaction; the room row
    is then held until commit so concurrent bookings for it queue up behind
    this one instead of both passing the count.
    """
    room = await rooms.find_by_id(room_id, for_update=lock)
    if room is None:
        raise NotFoundError(f"Room {room_id} not found")

    occupied = await bookings.count_by_room_id(room_id)
    if occupied >= room.capacity:
        logger.info(
            "booking_rejected",
            room_id=room_id,
            reason="room_full",
            capacity=room.capacity,
            occupied=occupied,
        )
        raise UnauthorizedError(f"Room {room_id} is full")
