from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TeamCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    skill_level: int = Field(..., ge=1, le=10)


class TeamResponse(TeamCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    captain_id: int
    created_at: datetime
    updated_at: datetime


class TeamMemberCreate(BaseModel):
    user_id: int = Field(..., gt=0)


class TeamMemberResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    team_id: int
    user_id: int
    joined_at: datetime
