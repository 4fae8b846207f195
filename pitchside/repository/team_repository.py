from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from pitchside.models.team import Team, TeamMember


def get_team(db: Session, team_id: int) -> Optional[Team]:
    return db.query(Team).filter(Team.id == team_id).first()


def list_teams(db: Session) -> List[Team]:
    return db.query(Team).order_by(Team.id).all()


def list_teams_captained_by(db: Session, user_id: int) -> List[Team]:
    return db.query(Team).filter(Team.captain_id == user_id).order_by(Team.id).all()


def list_teams_joined_by(db: Session, user_id: int) -> List[Team]:
    return (
        db.query(Team)
        .join(TeamMember, TeamMember.team_id == Team.id)
        .filter(TeamMember.user_id == user_id)
        .order_by(Team.id)
        .all()
    )


def create_team(db: Session, team: Team) -> Team:
    db.add(team)
    db.flush()
    return team


def get_membership(db: Session, team_id: int, user_id: int) -> Optional[TeamMember]:
    return (
        db.query(TeamMember)
        .filter(TeamMember.team_id == team_id, TeamMember.user_id == user_id)
        .first()
    )


def list_members(db: Session, team_id: int) -> List[TeamMember]:
    return (
        db.query(TeamMember)
        .filter(TeamMember.team_id == team_id)
        .order_by(TeamMember.joined_at, TeamMember.id)
        .all()
    )


def add_member(db: Session, member: TeamMember) -> TeamMember:
    db.add(member)
    db.flush()
    return member


def delete_member(db: Session, member: TeamMember) -> None:
    db.delete(member)
