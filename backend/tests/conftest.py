import os

os.environ["DATABASE_URL"] = "sqlite://"

import uuid
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import get_db
from main import app
from models import Base, Camera, Users
from api.auth.security import create_access_token

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def test_db():
    """Provides a session on a freshly created in-memory database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(test_db):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def test_user(test_db):
    user = Users(user_id=uuid.uuid4(), username="testuser")
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


@pytest.fixture
def other_user(test_db):
    user = Users(user_id=uuid.uuid4(), username="otheruser")
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


@pytest.fixture
def front_door(test_db):
    camera = Camera(camera_id=uuid.uuid4(), name="Front Door")
    test_db.add(camera)
    test_db.commit()
    test_db.refresh(camera)
    return camera


@pytest.fixture
def back_yard(test_db):
    camera = Camera(camera_id=uuid.uuid4(), name="Back Yard")
    test_db.add(camera)
    test_db.commit()
    test_db.refresh(camera)
    return camera


@pytest.fixture
def auth_header():
    """Builds a bearer header for the given user id."""
    def _header(user_id, is_admin=False):
        return {"Authorization": f"Bearer {create_access_token(user_id, is_admin)}"}
    return _header
