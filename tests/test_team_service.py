import pytest

from pitchside.core.exceptions import (
    ConflictError,
    InvalidOperationError,
    NotAuthorizedError,
    NotFoundError,
)
from pitchside.schemas.team import TeamCreate
from pitchside.services import TeamService


def test_create_team_sets_captain(db_session, make_user):
    captain = make_user()

    team = TeamService(db_session).create_team(
        captain.id, TeamCreate(name="Sunday Legends", skill_level=7)
    )

    assert team.captain_id == captain.id
    assert team.skill_level == 7
    # Captaincy does not create a roster row
    assert TeamService(db_session).list_team_members(team.id) == []


def test_create_team_for_unknown_captain(db_session):
    with pytest.raises(NotFoundError):
        TeamService(db_session).create_team(77, TeamCreate(name="Ghosts", skill_level=1))


def test_add_member_by_captain(db_session, make_user, make_team):
    captain, player = make_user(), make_user()
    team = make_team(captain)
    service = TeamService(db_session)

    member = service.add_member(captain.id, team.id, player.id)

    assert member.team_id == team.id
    assert member.user_id == player.id
    assert member.joined_at is not None


def test_add_member_twice_conflicts(db_session, make_user, make_team):
    captain, player = make_user(), make_user()
    team = make_team(captain, members=[player])

    with pytest.raises(ConflictError, match="already a member"):
        TeamService(db_session).add_member(captain.id, team.id, player.id)


def test_add_member_checks_team_then_captain_then_user(db_session, make_user, make_team):
    captain, player = make_user(), make_user()
    team = make_team(captain)
    service = TeamService(db_session)

    with pytest.raises(NotFoundError, match="Team not found"):
        service.add_member(captain.id, 999, player.id)
    with pytest.raises(NotAuthorizedError):
        service.add_member(player.id, team.id, player.id)
    with pytest.raises(NotFoundError, match="User not found"):
        service.add_member(captain.id, team.id, 999)


def test_members_cannot_manage_roster(db_session, make_user, make_team):
    captain, member, newcomer = make_user(), make_user(), make_user()
    team = make_team(captain, members=[member])
    service = TeamService(db_session)

    with pytest.raises(NotAuthorizedError):
        service.add_member(member.id, team.id, newcomer.id)
    with pytest.raises(NotAuthorizedError):
        service.remove_member(member.id, team.id, member.id)

    assert [m.user_id for m in service.list_team_members(team.id)] == [member.id]


def test_captain_cannot_remove_themselves(db_session, make_user, make_team):
    captain = make_user()
    team = make_team(captain, members=[captain])

    with pytest.raises(InvalidOperationError):
        TeamService(db_session).remove_member(captain.id, team.id, captain.id)


def test_remove_member(db_session, make_user, make_team):
    captain, player, stranger = make_user(), make_user(), make_user()
    team = make_team(captain, members=[player])
    service = TeamService(db_session)

    assert service.remove_member(captain.id, team.id, player.id) is True
    assert service.list_team_members(team.id) == []

    with pytest.raises(NotFoundError, match="not a member"):
        service.remove_member(captain.id, team.id, stranger.id)


def test_list_team_members_for_missing_team(db_session):
    with pytest.raises(NotFoundError):
        TeamService(db_session).list_team_members(5)


def test_list_teams_by_user_merges_captaincy_and_membership(db_session, make_user, make_team):
    user, other = make_user(), make_user()
    captained = make_team(user, name="Mine")
    joined = make_team(other, members=[user], name="Theirs")
    make_team(other, name="Unrelated")

    teams = TeamService(db_session).list_teams_by_user(user.id)

    assert [team.id for team in teams] == [captained.id, joined.id]


def test_captain_listed_once_when_also_a_member(db_session, make_user, make_team):
    captain = make_user()
    team = make_team(captain)
    service = TeamService(db_session)
    service.add_member(captain.id, team.id, captain.id)

    members = service.list_team_members(team.id)
    teams = service.list_teams_by_user(captain.id)

    assert [m.user_id for m in members] == [captain.id]
    assert [t.id for t in teams] == [team.id]
