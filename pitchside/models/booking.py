from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from pitchside.core.database import Base

BOOKING_STATUSES = ("pending", "confirmed", "cancelled")


class Booking(Base):
    """A user's reservation of a field slot, optionally on behalf of a team."""

    __tablename__ = "bookings"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'confirmed', 'cancelled')",
            name="ck_bookings_status",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    slot_id = Column(Integer, ForeignKey("field_slots.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=True)
    status = Column(String(30), nullable=False, default="pending", server_default="pending")
    # Snapshot of the slot price when the booking was made
    total_price = Column(Numeric(10, 2), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    slot = relationship("FieldSlot", back_populates="bookings", lazy="joined")
    user = relationship("User")
    team = relationship("Team")

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            f"<Booking(id={self.id}, slot_id={self.slot_id}, "
            f"user_id={self.user_id}, status={self.status})>"
        )


__all__ = ["Booking", "BOOKING_STATUSES"]
