from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField, field_validator

from pitchside.core.money import to_number


class FieldBase(BaseModel):
    name: str = PydanticField(..., min_length=1, max_length=200)
    address: str = PydanticField(..., min_length=1)
    description: Optional[str] = None
    hourly_rate: float = PydanticField(..., gt=0)


class FieldCreate(FieldBase):
    pass


class FieldUpdate(BaseModel):
    name: Optional[str] = PydanticField(None, min_length=1, max_length=200)
    address: Optional[str] = PydanticField(None, min_length=1)
    description: Optional[str] = None
    hourly_rate: Optional[float] = PydanticField(None, gt=0)


class FieldResponse(FieldBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    created_at: datetime
    updated_at: datetime

    @field_validator("hourly_rate", mode="before")
    @classmethod
    def _coerce_rate(cls, value):
        return to_number(value)
