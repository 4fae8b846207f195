from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from pitchside.models.booking import Booking
from pitchside.models.field import Field
from pitchside.models.slot import FieldSlot


def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
    """Fetch a booking with its slot and the slot's field eagerly loaded."""

    return (
        db.query(Booking)
        .options(joinedload(Booking.slot).joinedload(FieldSlot.field))
        .filter(Booking.id == booking_id)
        .first()
    )


def list_bookings(
    db: Session,
    *,
    user_id: Optional[int] = None,
    field_owner_id: Optional[int] = None,
) -> List[Booking]:
    query = db.query(Booking)

    if user_id is not None:
        query = query.filter(Booking.user_id == user_id)
    if field_owner_id is not None:
        query = (
            query.join(FieldSlot, Booking.slot_id == FieldSlot.id)
            .join(Field, FieldSlot.field_id == Field.id)
            .filter(Field.owner_id == field_owner_id)
        )

    return query.order_by(Booking.created_at, Booking.id).all()


def create_booking(db: Session, booking: Booking) -> Booking:
    db.add(booking)
    db.flush()
    return booking
