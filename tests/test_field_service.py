import pytest

from pitchside.core.exceptions import NotAuthorizedError, NotFoundError
from pitchside.schemas.field import FieldCreate, FieldUpdate
from pitchside.services import FieldService
from tests.conftest import API


def test_create_field_persists_owner_and_rate(db_session, make_user):
    owner = make_user(role="field_owner")
    service = FieldService(db_session)

    field = service.create_field(
        owner.id,
        FieldCreate(name="La Bombonera", address="Brandsen 805", hourly_rate=49.999),
    )

    assert field.id is not None
    assert field.owner_id == owner.id
    assert float(field.hourly_rate) == 50.0
    assert field.description is None


def test_create_field_for_unknown_owner_fails(db_session):
    service = FieldService(db_session)

    with pytest.raises(NotFoundError):
        service.create_field(999, FieldCreate(name="X", address="Y", hourly_rate=10))


def test_update_field_applies_only_supplied_attributes(db_session, make_user, make_field):
    owner = make_user(role="field_owner")
    field = make_field(owner, name="Old name", description="Grass")
    service = FieldService(db_session)

    updated = service.update_field(owner.id, field.id, FieldUpdate(hourly_rate=75))

    assert updated.name == "Old name"
    assert updated.description == "Grass"
    assert float(updated.hourly_rate) == 75.0


def test_update_field_by_non_owner_is_rejected(db_session, make_user, make_field):
    owner = make_user(role="field_owner")
    intruder = make_user(role="field_owner")
    field = make_field(owner, name="Untouched")
    service = FieldService(db_session)

    with pytest.raises(NotAuthorizedError):
        service.update_field(intruder.id, field.id, FieldUpdate(name="Hijacked"))

    db_session.refresh(field)
    assert field.name == "Untouched"


def test_update_missing_field_is_rejected_as_not_authorized(db_session, make_user):
    owner = make_user(role="field_owner")

    with pytest.raises(NotAuthorizedError):
        FieldService(db_session).update_field(owner.id, 12345, FieldUpdate(name="Nope"))


def test_list_fields_by_owner_filters_by_owner(db_session, make_user, make_field):
    first = make_user(role="field_owner")
    second = make_user(role="field_owner")
    make_field(first, name="A")
    make_field(first, name="B")
    make_field(second, name="C")
    service = FieldService(db_session)

    assert [field.name for field in service.list_fields_by_owner(first.id)] == ["A", "B"]
    assert len(service.list_fields()) == 3


def test_field_routes_render_rate_as_number(client, make_user, auth_headers):
    owner = make_user(role="field_owner")

    response = client.post(
        f"{API}/fields/",
        json={"name": "Monumental", "address": "Figueroa Alcorta 7597", "hourly_rate": 80},
        headers=auth_headers(owner),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["hourly_rate"] == 80.0
    assert body["owner_id"] == owner.id

    listing = client.get(f"{API}/fields/owners/{owner.id}")
    assert [field["id"] for field in listing.json()] == [body["id"]]


def test_field_route_rejects_non_positive_rate(client, make_user, auth_headers):
    owner = make_user(role="field_owner")

    response = client.post(
        f"{API}/fields/",
        json={"name": "Free", "address": "Somewhere", "hourly_rate": 0},
        headers=auth_headers(owner),
    )

    assert response.status_code == 422
    assert "hourly_rate" in response.json()["detail"]
