"""Domain services for the Pitchside service."""

from pitchside.services.booking_service import BookingService
from pitchside.services.field_service import FieldService
from pitchside.services.slot_service import SlotService
from pitchside.services.team_service import TeamService

__all__ = ["BookingService", "FieldService", "SlotService", "TeamService"]
