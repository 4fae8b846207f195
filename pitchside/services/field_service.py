from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pitchside.core.exceptions import NotAuthorizedError, NotFoundError
from pitchside.core.money import to_storage
from pitchside.models.field import Field
from pitchside.repository import field_repository, user_repository
from pitchside.schemas.field import FieldCreate, FieldUpdate

logger = logging.getLogger(__name__)


class FieldService:
    def __init__(self, db: Session):
        self.db = db

    def list_fields(self) -> List[Field]:
        return field_repository.list_fields(self.db)

    def list_fields_by_owner(self, owner_id: int) -> List[Field]:
        return field_repository.list_fields(self.db, owner_id=owner_id)

    def get_field(self, field_id: int) -> Field:
        field = field_repository.get_field(self.db, field_id)
        if field is None:
            raise NotFoundError(f"Field {field_id} not found")
        return field

    def create_field(self, owner_id: int, field_in: FieldCreate) -> Field:
        if user_repository.get_user(self.db, owner_id) is None:
            raise NotFoundError("User not found")

        field_data = field_in.model_dump()
        field_data["hourly_rate"] = to_storage(field_data["hourly_rate"])
        field = Field(owner_id=owner_id, **field_data)

        try:
            field_repository.create_field(self.db, field)
            self.db.commit()
            self.db.refresh(field)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create field",
            ) from exc

        logger.info("Field %s created by owner %s", field.id, owner_id)
        return field

    def update_field(self, owner_id: int, field_id: int, field_in: FieldUpdate) -> Field:
        field = field_repository.get_owned_field(self.db, field_id, owner_id)
        if field is None:
            logger.warning("User %s may not update field %s", owner_id, field_id)
            raise NotAuthorizedError(
                "Field not found or you do not have permission to update it"
            )

        # Only description is nullable; an explicit null elsewhere means "leave as is"
        update_data = {
            attr: value
            for attr, value in field_in.model_dump(exclude_unset=True).items()
            if value is not None or attr == "description"
        }
        if "hourly_rate" in update_data:
            update_data["hourly_rate"] = to_storage(update_data["hourly_rate"])

        for attr, value in update_data.items():
            setattr(field, attr, value)
        field.updated_at = datetime.now(timezone.utc)

        try:
            self.db.flush()
            self.db.commit()
            self.db.refresh(field)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update field",
            ) from exc

        logger.info("Field %s updated by owner %s: %s", field_id, owner_id, sorted(update_data))
        return field
