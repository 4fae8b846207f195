"""Shared dependencies for the Pitchside service."""

from typing import Generator

from pitchside.core.database import SessionLocal


def get_db() -> Generator:
    """Provide a transactional scope around a series of operations."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
