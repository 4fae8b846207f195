"""Pydantic schemas for booking resources."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pitchside.core.money import to_number

BookingStatus = Literal["pending", "confirmed", "cancelled"]


class BookingCreate(BaseModel):
    """Schema used when booking a slot."""

    slot_id: int = Field(..., gt=0)
    team_id: Optional[int] = Field(None, gt=0)
    notes: Optional[str] = None


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingResponse(BaseModel):
    """Booking data returned to API clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    slot_id: int
    user_id: int
    team_id: Optional[int] = None
    status: BookingStatus
    total_price: float
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("total_price", mode="before")
    @classmethod
    def _coerce_total_price(cls, value):
        return to_number(value)
