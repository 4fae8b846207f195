from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, true
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from pitchside.core.database import Base


class FieldSlot(Base):
    """A bookable time window on a field."""

    __tablename__ = "field_slots"

    id = Column(Integer, primary_key=True, index=True)
    field_id = Column(Integer, ForeignKey("fields.id"), nullable=False, index=True)
    start_time = Column(DateTime(timezone=True), nullable=False)
    end_time = Column(DateTime(timezone=True), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    is_available = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    field = relationship("Field", back_populates="slots", lazy="joined")
    bookings = relationship("Booking", back_populates="slot")

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            "<FieldSlot(id={id}, field_id={field}, start_time={start}, end_time={end})>"
        ).format(
            id=self.id,
            field=self.field_id,
            start=self.start_time,
            end=self.end_time,
        )
