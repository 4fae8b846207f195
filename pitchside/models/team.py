from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from pitchside.core.database import Base


class Team(Base):
    """A team led by a single captain.

    The captain lives on the team row only; they are not implicitly a
    ``TeamMember``.
    """

    __tablename__ = "teams"
    __table_args__ = (
        CheckConstraint("skill_level BETWEEN 1 AND 10", name="ck_teams_skill_level"),
    )

    id = Column(Integer, primary_key=True, index=True)
    captain_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    skill_level = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    captain = relationship("User", lazy="joined")
    members = relationship(
        "TeamMember", back_populates="team", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Team(id={self.id}, name={self.name}, captain_id={self.captain_id})>"


class TeamMember(Base):
    __tablename__ = "team_members"
    __table_args__ = (
        UniqueConstraint("team_id", "user_id", name="uq_team_members_team_user"),
    )

    id = Column(Integer, primary_key=True, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    joined_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    team = relationship("Team", back_populates="members")
    user = relationship("User")

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<TeamMember(team_id={self.team_id}, user_id={self.user_id})>"
