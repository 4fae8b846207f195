"""API routes for teams and their rosters."""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from pitchside.core.security import get_caller_id
from pitchside.dependencies import get_db
from pitchside.schemas import TeamCreate, TeamMemberCreate, TeamMemberResponse, TeamResponse
from pitchside.services import TeamService

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("/", response_model=List[TeamResponse])
def list_teams(db: Session = Depends(get_db)) -> List[TeamResponse]:
    service = TeamService(db)
    return service.list_teams()


@router.get("/users/{user_id}", response_model=List[TeamResponse])
def list_teams_by_user(user_id: int, db: Session = Depends(get_db)) -> List[TeamResponse]:
    """Retrieve teams the user captains or plays for, each listed once."""

    service = TeamService(db)
    return service.list_teams_by_user(user_id)


@router.get("/{team_id}", response_model=TeamResponse)
def get_team(team_id: int, db: Session = Depends(get_db)) -> TeamResponse:
    service = TeamService(db)
    return service.get_team(team_id)


@router.post("/", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
def create_team(
    payload: TeamCreate,
    db: Session = Depends(get_db),
    caller_id: int = Depends(get_caller_id),
) -> TeamResponse:
    """Create a team captained by the caller."""

    service = TeamService(db)
    return service.create_team(caller_id, payload)


@router.get("/{team_id}/members", response_model=List[TeamMemberResponse])
def list_team_members(team_id: int, db: Session = Depends(get_db)) -> List[TeamMemberResponse]:
    service = TeamService(db)
    return service.list_team_members(team_id)


@router.post(
    "/{team_id}/members",
    response_model=TeamMemberResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_team_member(
    team_id: int,
    payload: TeamMemberCreate,
    db: Session = Depends(get_db),
    caller_id: int = Depends(get_caller_id),
) -> TeamMemberResponse:
    service = TeamService(db)
    return service.add_member(caller_id, team_id, payload.user_id)


@router.delete("/{team_id}/members/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_team_member(
    team_id: int,
    user_id: int,
    db: Session = Depends(get_db),
    caller_id: int = Depends(get_caller_id),
):
    service = TeamService(db)
    service.remove_member(caller_id, team_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
