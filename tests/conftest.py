import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("ALGORITHM", "HS256")

from datetime import datetime, timedelta
from decimal import Decimal
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pitchside.core.database import Base
from pitchside.core.security import create_access_token
from pitchside.dependencies import get_db
from pitchside.main import app
from pitchside.models import Field, FieldSlot, Team, TeamMember, User

API = "/api/pitchside/v1"


@pytest.fixture()
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def client(db_session):
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture()
def make_user(db_session):
    sequence = count(1)

    def _make_user(role: str = "player", **overrides):
        number = next(sequence)
        user_data = {
            "email": f"user{number}@pitchside.test",
            "password_hash": "not-a-real-hash",
            "first_name": f"User{number}",
            "last_name": "Tester",
            "role": role,
        }
        user_data.update(overrides)
        user = User(**user_data)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def make_field(db_session):
    def _make_field(owner, hourly_rate="50.00", **overrides):
        field = Field(
            owner_id=owner.id,
            name=overrides.pop("name", "Cancha Central"),
            address=overrides.pop("address", "Av. Siempre Viva 742"),
            hourly_rate=Decimal(hourly_rate),
            **overrides,
        )
        db_session.add(field)
        db_session.commit()
        db_session.refresh(field)
        return field

    return _make_field


@pytest.fixture()
def make_slot(db_session):
    def _make_slot(field, price="100.00", is_available=True, start=None):
        start_time = start or datetime(2026, 11, 1, 18, 0)
        slot = FieldSlot(
            field_id=field.id,
            start_time=start_time,
            end_time=start_time + timedelta(hours=1),
            price=Decimal(price),
            is_available=is_available,
        )
        db_session.add(slot)
        db_session.commit()
        db_session.refresh(slot)
        return slot

    return _make_slot


@pytest.fixture()
def make_team(db_session):
    def _make_team(captain, members=(), name="Los Pibes", skill_level=5):
        team = Team(captain_id=captain.id, name=name, skill_level=skill_level)
        db_session.add(team)
        db_session.flush()
        for member in members:
            db_session.add(TeamMember(team_id=team.id, user_id=member.id))
        db_session.commit()
        db_session.refresh(team)
        return team

    return _make_team


@pytest.fixture()
def auth_headers():
    def _auth_headers(user):
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _auth_headers
