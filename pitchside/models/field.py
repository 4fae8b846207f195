from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from pitchside.core.database import Base


class Field(Base):
    """A football field offered for rent by its owner."""

    __tablename__ = "fields"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    address = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    hourly_rate = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    owner = relationship("User", lazy="joined")
    slots = relationship("FieldSlot", back_populates="field")

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Field(id={self.id}, name={self.name}, owner_id={self.owner_id})>"
