"""SQLAlchemy model for accounts managed by the identity service."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from pitchside.core.database import Base

USER_ROLES = ("player", "field_owner", "admin")


class User(Base):
    """Represents a registered player, field owner or admin."""

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "role IN ('player', 'field_owner', 'admin')", name="ck_users_role"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=False)
    first_name = Column(String(200), nullable=False)
    last_name = Column(String(200), nullable=False)
    role = Column(String(30), nullable=False)
    phone = Column(String(20), nullable=True)
    avatar_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"


__all__ = ["User", "USER_ROLES"]
