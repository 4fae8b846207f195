from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from pitchside.core.money import to_number


class SlotCreate(BaseModel):
    field_id: int = Field(..., gt=0)
    start_time: datetime
    end_time: datetime
    price: float = Field(..., gt=0)

    @field_validator("end_time")
    def validate_time_range(cls, end_time: datetime, info: ValidationInfo) -> datetime:
        start_time = info.data.get("start_time")
        if start_time is None:
            return end_time
        if (start_time.tzinfo is None) != (end_time.tzinfo is None):
            raise ValueError("start_time and end_time must both carry a UTC offset or neither")
        if end_time <= start_time:
            raise ValueError("end_time must be after start_time")
        return end_time


class SlotResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    field_id: int
    start_time: datetime
    end_time: datetime
    price: float
    is_available: bool
    created_at: datetime

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value):
        return to_number(value)
