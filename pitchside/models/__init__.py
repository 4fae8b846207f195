"""SQLAlchemy models for the Pitchside service."""
from pitchside.models.user import User
from pitchside.models.field import Field
from pitchside.models.slot import FieldSlot
from pitchside.models.team import Team, TeamMember
from pitchside.models.booking import Booking

__all__ = ["User", "Field", "FieldSlot", "Team", "TeamMember", "Booking"]
