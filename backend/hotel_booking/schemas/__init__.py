from hotel_booking.schemas.booking import (
    BookingBody,
    BookingIdResponse,
    BookingResponse,
    RoomResponse,
)

__all__ = [
    "BookingBody", "BookingIdResponse", "BookingResponse", "RoomResponse",
]
