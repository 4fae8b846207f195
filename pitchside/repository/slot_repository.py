from __future__ import annotations

from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from pitchside.models.slot import FieldSlot


def get_slot(db: Session, slot_id: int) -> Optional[FieldSlot]:
    return db.query(FieldSlot).filter(FieldSlot.id == slot_id).first()


def list_slots(
    db: Session,
    *,
    field_id: Optional[int] = None,
    available_only: bool = False,
) -> List[FieldSlot]:
    query = db.query(FieldSlot)

    if field_id is not None:
        query = query.filter(FieldSlot.field_id == field_id)
    if available_only:
        query = query.filter(FieldSlot.is_available.is_(True))

    return query.order_by(FieldSlot.start_time, FieldSlot.id).all()


def create_slot(db: Session, slot: FieldSlot) -> FieldSlot:
    db.add(slot)
    db.flush()
    return slot


def claim_slot(db: Session, slot_id: int) -> bool:
    """Flip an available slot to unavailable in a single conditional UPDATE.

    Returns ``True`` only for the caller whose statement changed the row, so
    concurrent claims on one slot cannot both succeed. The change is left
    uncommitted for the caller's transaction.
    """

    result = db.execute(
        update(FieldSlot)
        .where(FieldSlot.id == slot_id, FieldSlot.is_available.is_(True))
        .values(is_available=False)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1
