from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pitchside.core.exceptions import ConflictError, NotAuthorizedError, NotFoundError
from pitchside.models.booking import Booking
from pitchside.repository import (
    booking_repository,
    slot_repository,
    team_repository,
    user_repository,
)
from pitchside.schemas.booking import BookingCreate, BookingStatus
from pitchside.services.team_service import TeamService

logger = logging.getLogger(__name__)


class BookingService:
    """Booking lifecycle on top of field slots.

    Creating a booking claims its slot for good. Any authorized party may
    then move the booking between any two statuses; the slot is left as is.
    """

    def __init__(self, db: Session):
        self.db = db
        self.team_service = TeamService(db)

    def get_booking(self, booking_id: int) -> Booking:
        booking = booking_repository.get_booking(self.db, booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")
        return booking

    def list_bookings_by_user(self, user_id: int) -> List[Booking]:
        return booking_repository.list_bookings(self.db, user_id=user_id)

    def list_bookings_by_field_owner(self, owner_id: int) -> List[Booking]:
        return booking_repository.list_bookings(self.db, field_owner_id=owner_id)

    def _ensure_team_member(self, user_id: int, team_id: int) -> None:
        team = team_repository.get_team(self.db, team_id)
        if team is None:
            raise NotFoundError("Team not found")
        if not self.team_service.is_member(team, user_id):
            logger.warning("User %s tried to book for team %s", user_id, team_id)
            raise NotAuthorizedError("Not a team member")

    def _claim_slot(self, slot_id: int) -> None:
        if not slot_repository.claim_slot(self.db, slot_id):
            self.db.rollback()
            logger.warning("Slot %s was claimed by another booking", slot_id)
            raise ConflictError("Slot not available")

    def create_booking(self, user_id: int, payload: BookingCreate) -> Booking:
        if user_repository.get_user(self.db, user_id) is None:
            raise NotFoundError("User not found")

        slot = slot_repository.get_slot(self.db, payload.slot_id)
        if slot is None:
            raise NotFoundError("Slot not found")
        if not slot.is_available:
            raise ConflictError("Slot not available")

        if payload.team_id is not None:
            self._ensure_team_member(user_id, payload.team_id)

        booking = Booking(
            slot_id=slot.id,
            user_id=user_id,
            team_id=payload.team_id,
            status="pending",
            total_price=slot.price,
            notes=payload.notes,
        )

        self._claim_slot(slot.id)
        try:
            booking_repository.create_booking(self.db, booking)
            self.db.commit()
            self.db.refresh(booking)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create booking",
            ) from exc

        logger.info(
            "Booking %s created for slot %s by user %s", booking.id, slot.id, user_id
        )
        return booking

    def update_booking_status(
        self,
        booking_id: int,
        new_status: BookingStatus,
        caller_id: int,
    ) -> Booking:
        booking = self.get_booking(booking_id)

        field_owner_id: Optional[int] = None
        if booking.slot is not None and booking.slot.field is not None:
            field_owner_id = booking.slot.field.owner_id

        if caller_id not in (booking.user_id, field_owner_id):
            logger.warning(
                "User %s may not change status of booking %s", caller_id, booking_id
            )
            raise NotAuthorizedError(
                "Only the field owner or the booking creator can update its status"
            )

        previous_status = booking.status
        booking.status = new_status
        booking.updated_at = datetime.now(timezone.utc)

        try:
            self.db.commit()
            self.db.refresh(booking)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update booking status",
            ) from exc

        logger.info(
            "Booking %s moved from %s to %s by user %s",
            booking_id,
            previous_status,
            new_status,
            caller_id,
        )
        return booking
