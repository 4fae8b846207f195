"""Lookups against accounts owned by the identity service."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from pitchside.models.user import User


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


__all__ = ["get_user"]
