from __future__ import annotations

import logging
from typing import Dict, List

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pitchside.core.exceptions import (
    ConflictError,
    InvalidOperationError,
    NotAuthorizedError,
    NotFoundError,
)
from pitchside.models.team import Team, TeamMember
from pitchside.repository import team_repository, user_repository
from pitchside.schemas.team import TeamCreate

logger = logging.getLogger(__name__)


class TeamService:
    """Teams and their rosters.

    Only the captain may change the roster. The captain is recorded on the
    team itself and only appears in the roster if added explicitly.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_team(self, team_id: int) -> Team:
        team = team_repository.get_team(self.db, team_id)
        if team is None:
            raise NotFoundError("Team not found")
        return team

    def _get_captained_team(self, captain_id: int, team_id: int, action: str) -> Team:
        team = self.get_team(team_id)
        if team.captain_id != captain_id:
            logger.warning("User %s is not captain of team %s", captain_id, team_id)
            raise NotAuthorizedError(f"Only the team captain can {action} members")
        return team

    def is_member(self, team: Team, user_id: int) -> bool:
        """True when ``user_id`` captains ``team`` or holds a roster row."""

        if team.captain_id == user_id:
            return True
        return team_repository.get_membership(self.db, team.id, user_id) is not None

    def list_teams(self) -> List[Team]:
        return team_repository.list_teams(self.db)

    def list_teams_by_user(self, user_id: int) -> List[Team]:
        teams: Dict[int, Team] = {}
        for team in team_repository.list_teams_captained_by(self.db, user_id):
            teams.setdefault(team.id, team)
        for team in team_repository.list_teams_joined_by(self.db, user_id):
            teams.setdefault(team.id, team)
        return list(teams.values())

    def list_team_members(self, team_id: int) -> List[TeamMember]:
        self.get_team(team_id)
        return team_repository.list_members(self.db, team_id)

    def create_team(self, captain_id: int, team_in: TeamCreate) -> Team:
        if user_repository.get_user(self.db, captain_id) is None:
            raise NotFoundError("Captain not found")

        team = Team(captain_id=captain_id, **team_in.model_dump())

        try:
            team_repository.create_team(self.db, team)
            self.db.commit()
            self.db.refresh(team)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create team",
            ) from exc

        logger.info("Team %s created with captain %s", team.id, captain_id)
        return team

    def add_member(self, captain_id: int, team_id: int, user_id: int) -> TeamMember:
        team = self._get_captained_team(captain_id, team_id, "add")

        if user_repository.get_user(self.db, user_id) is None:
            raise NotFoundError("User not found")

        if team_repository.get_membership(self.db, team.id, user_id) is not None:
            raise ConflictError("User is already a member of this team")

        member = TeamMember(team_id=team.id, user_id=user_id)

        try:
            team_repository.add_member(self.db, member)
            self.db.commit()
            self.db.refresh(member)
        except IntegrityError as exc:
            # Lost a race against a concurrent insert of the same pair
            self.db.rollback()
            raise ConflictError("User is already a member of this team") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to add team member",
            ) from exc

        logger.info("User %s joined team %s", user_id, team.id)
        return member

    def remove_member(self, captain_id: int, team_id: int, user_id: int) -> bool:
        team = self._get_captained_team(captain_id, team_id, "remove")

        if user_id == team.captain_id:
            raise InvalidOperationError("Captain cannot remove themselves from the team")

        member = team_repository.get_membership(self.db, team.id, user_id)
        if member is None:
            raise NotFoundError("User is not a member of this team")

        try:
            team_repository.delete_member(self.db, member)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to remove team member",
            ) from exc

        logger.info("User %s removed from team %s", user_id, team.id)
        return True
