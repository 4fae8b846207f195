from __future__ import annotations

import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pitchside.core.exceptions import NotAuthorizedError, NotFoundError
from pitchside.core.money import to_storage
from pitchside.models.slot import FieldSlot
from pitchside.repository import field_repository, slot_repository
from pitchside.schemas.slot import SlotCreate

logger = logging.getLogger(__name__)


class SlotService:
    def __init__(self, db: Session):
        self.db = db

    def get_slot(self, slot_id: int) -> FieldSlot:
        slot = slot_repository.get_slot(self.db, slot_id)
        if slot is None:
            raise NotFoundError("Slot not found")
        return slot

    def list_available_slots(self) -> List[FieldSlot]:
        return slot_repository.list_slots(self.db, available_only=True)

    def list_slots_by_field(self, field_id: int) -> List[FieldSlot]:
        return slot_repository.list_slots(self.db, field_id=field_id)

    def create_slot(self, caller_id: int, payload: SlotCreate) -> FieldSlot:
        """Open a new slot on a field owned by ``caller_id``.

        Overlapping slots on the same field are accepted: a field may expose
        parallel bookable units.
        """

        field = field_repository.get_field(self.db, payload.field_id)
        if field is None:
            raise NotFoundError("Field not found")
        if field.owner_id != caller_id:
            logger.warning(
                "User %s may not open slots on field %s", caller_id, payload.field_id
            )
            raise NotAuthorizedError("Only the field owner can create slots")

        slot = FieldSlot(
            field_id=field.id,
            start_time=payload.start_time,
            end_time=payload.end_time,
            price=to_storage(payload.price),
            is_available=True,
        )

        try:
            slot_repository.create_slot(self.db, slot)
            self.db.commit()
            self.db.refresh(slot)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create slot",
            ) from exc

        logger.info("Slot %s created on field %s", slot.id, field.id)
        return slot
