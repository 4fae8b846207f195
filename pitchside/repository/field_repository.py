from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from pitchside.models.field import Field


def list_fields(db: Session, *, owner_id: Optional[int] = None) -> List[Field]:
    query = db.query(Field)

    if owner_id is not None:
        query = query.filter(Field.owner_id == owner_id)

    return query.order_by(Field.id).all()


def get_field(db: Session, field_id: int) -> Optional[Field]:
    return db.query(Field).filter(Field.id == field_id).first()


def get_owned_field(db: Session, field_id: int, owner_id: int) -> Optional[Field]:
    return (
        db.query(Field)
        .filter(Field.id == field_id, Field.owner_id == owner_id)
        .first()
    )


def create_field(db: Session, field: Field) -> Field:
    db.add(field)
    db.flush()
    return field
