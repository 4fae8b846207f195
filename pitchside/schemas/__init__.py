"""Pydantic schemas for the Pitchside service."""

from pitchside.schemas.booking import (
    BookingCreate,
    BookingResponse,
    BookingStatus,
    BookingStatusUpdate,
)
from pitchside.schemas.field import FieldCreate, FieldResponse, FieldUpdate
from pitchside.schemas.slot import SlotCreate, SlotResponse
from pitchside.schemas.team import (
    TeamCreate,
    TeamMemberCreate,
    TeamMemberResponse,
    TeamResponse,
)

__all__ = [
    "BookingCreate",
    "BookingResponse",
    "BookingStatus",
    "BookingStatusUpdate",
    "FieldCreate",
    "FieldResponse",
    "FieldUpdate",
    "SlotCreate",
    "SlotResponse",
    "TeamCreate",
    "TeamMemberCreate",
    "TeamMemberResponse",
    "TeamResponse",
]
