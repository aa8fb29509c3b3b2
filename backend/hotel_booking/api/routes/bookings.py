"""
Hotel room booking endpoints.

Domain errors are translated by kind: not found -> 404, unauthorized -> 403,
invalid -> 400. Any other failure while creating or changing a booking is
logged and answered with 400. Malformed ids keep the platform's historical
answers: a bad roomId is 404 and a bad bookingId path segment is 403.

Writes are committed before the user's cached booking is dropped, so a read
racing the write can never re-cache the old row after invalidation.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.api.dependencies import get_booking_service
from hotel_booking.core.exceptions import BookingError, InvalidBookingError
from hotel_booking.core.logging import get_logger
from hotel_booking.core.security import get_current_user_id
from hotel_booking.db.session import get_db
from hotel_booking.schemas.booking import BookingBody, BookingIdResponse, BookingResponse
from hotel_booking.services.booking_service import BookingService
from hotel_booking.services.cache_service import (
    get_cached_booking,
    invalidate_booking_cache,
    set_cached_booking,
)

logger = get_logger(__name__)
router = APIRouter(prefix="/booking", tags=["Booking"])

# Primary keys are int4 columns
MAX_ID = 2**31 - 1


def parse_positive_id(value: Any) -> Optional[int]:
    """Return value as a positive int that fits a primary key, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if isinstance(value, int) and 1 <= value <= MAX_ID:
        return value
    return None


def _room_id_or_404(body: Optional[BookingBody]) -> int:
    room_id = parse_positive_id(body.roomId if body else None)
    if room_id is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invalid roomId")
    return room_id


def _write_failed(operation: str, user_id: int, room_id: int, error: Exception) -> HTTPException:
    logger.error(
        "booking_write_failed",
        operation=operation,
        user_id=user_id,
        room_id=room_id,
        error=str(error),
        error_type=type(error).__name__,
    )
    return InvalidBookingError("Booking could not be saved").to_http_exception()


@router.get("", response_model=BookingResponse)
async def get_booking(
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Get the authenticated user's booking with its room."""
    cached = await get_cached_booking(user_id)
    if cached:
        return cached

    try:
        booking = await service.get_booking(user_id)
    except BookingError as e:
        raise e.to_http_exception()

    response = BookingResponse.model_validate(booking)
    await set_cached_booking(user_id, response.model_dump(mode="json"))
    return response


@router.post("", response_model=BookingIdResponse)
async def create_booking(
    body: Optional[BookingBody] = Body(None),
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
    db: AsyncSession = Depends(get_db),
):
    """Book a room for the authenticated user."""
    room_id = _room_id_or_404(body)

    try:
        booking_id = await service.create_booking(user_id, room_id)
        await db.commit()
    except BookingError as e:
        raise e.to_http_exception()
    except Exception as e:
        raise _write_failed("create", user_id, room_id, e)

    await invalidate_booking_cache(user_id)
    return BookingIdResponse(bookingId=booking_id)


@router.put("/{booking_id}", response_model=BookingIdResponse)
async def update_booking(
    booking_id: str,
    body: Optional[BookingBody] = Body(None),
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
    db: AsyncSession = Depends(get_db),
):
    """Move the authenticated user's booking to another room."""
    room_id = _room_id_or_404(body)

    parsed_booking_id = parse_positive_id(booking_id)
    if parsed_booking_id is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid bookingId")

    try:
        updated_id = await service.update_booking(user_id, room_id, parsed_booking_id)
        await db.commit()
    except BookingError as e:
        raise e.to_http_exception()
    except Exception as e:
        raise _write_failed("update", user_id, room_id, e)

    await invalidate_booking_cache(user_id)
    return BookingIdResponse(bookingId=updated_id)
