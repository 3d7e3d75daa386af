import os

# Must be set before the app modules build their engine and token settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ.pop("BREVO_API_KEY", None)

from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from database import SessionLocal, engine
from main import app
from models import AdvertisingSpace, Base, Profile, User, UserRole
from services.auth_service import create_access_token, hash_password

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_profile(db_session):
    counter = {"n": 0}

    def _make(role=UserRole.BUILDING_OWNER, first_name="Test", last_name="User", **fields):
        counter["n"] += 1
        user = User(email=f"user{counter['n']}@example.com", password=hash_password("secret123"))
        db_session.add(user)
        db_session.flush()
        profile = Profile(user_id=user.id, first_name=first_name, last_name=last_name, role=role, **fields)
        db_session.add(profile)
        db_session.commit()
        return profile

    return _make


@pytest.fixture
def make_space(db_session):
    counter = {"n": 0}

    def _make(owner, title="Space", location="Mumbai, Maharashtra", space_type="building",
              price=Decimal("10000"), status="available", minutes=None, **fields):
        counter["n"] += 1
        offset = counter["n"] if minutes is None else minutes
        space = AdvertisingSpace(
            owner_id=owner.user_id,
            title=title,
            location=location,
            space_type=space_type,
            price_per_month=price,
            availability_status=status,
            created_at=BASE_TIME + timedelta(minutes=offset),
            **fields,
        )
        db_session.add(space)
        db_session.commit()
        return space

    return _make


def auth_headers(profile):
    token = create_access_token(profile.user_id, profile.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers_for():
    return auth_headers
