"""
Pydantic schemas for booking request/response bodies.

The wire format is camelCase; ORM attributes are snake_case. Each response
field accepts either spelling so cached JSON validates as well as ORM rows.
"""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, Field


class BookingBody(BaseModel):
    # Left unvalidated: a missing or malformed roomId answers 404, not 422
    roomId: Any = None


class BookingIdResponse(BaseModel):
    bookingId: int


class RoomResponse(BaseModel):
    id: int
    name: str
    capacity: int
    hotelId: int = Field(validation_alias=AliasChoices("hotel_id", "hotelId"))
    createdAt: datetime = Field(validation_alias=AliasChoices("created_at", "createdAt"))
    updatedAt: datetime = Field(validation_alias=AliasChoices("updated_at", "updatedAt"))

    model_config = {"from_attributes": True}


class BookingResponse(BaseModel):
    id: int
    userId: int = Field(validation_alias=AliasChoices("user_id", "userId"))
    roomId: int = Field(validation_alias=AliasChoices("room_id", "roomId"))
    createdAt: datetime = Field(validation_alias=AliasChoices("created_at", "createdAt"))
    updatedAt: datetime = Field(validation_alias=AliasChoices("updated_at", "updatedAt"))
    Room: RoomResponse = Field(validation_alias=AliasChoices("room", "Room"))

    model_config = {"from_attributes": True}
