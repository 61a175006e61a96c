import uuid
import pytest
from datetime import datetime, timedelta, timezone
from jose import jwt
from config import settings
from core.errors import Unauthorized, Forbidden
from api.auth.security import create_access_token, get_current_user, is_admin


def test_token_round_trip():
    user_id = uuid.uuid4()

    user = get_current_user(create_access_token(user_id, is_admin=True))

    assert user.user_id == user_id
    assert user.is_admin is True


def test_expired_token_is_rejected():
    payload = {"sub": str(uuid.uuid4()), "role": "user", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)}
    token = jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    with pytest.raises(Unauthorized):
        get_current_user(token)


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"sub": str(uuid.uuid4())}, "another-key", algorithm=settings.ALGORITHM)

    with pytest.raises(Unauthorized):
        get_current_user(token)


def test_subject_must_be_a_user_id():
    token = jwt.encode({"sub": "testuser"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    with pytest.raises(Unauthorized):
        get_current_user(token)


def test_missing_token():
    with pytest.raises(Unauthorized):
        get_current_user(None)


def test_is_admin_rejects_regular_user():
    user = get_current_user(create_access_token(uuid.uuid4()))

    with pytest.raises(Forbidden):
        is_admin(user)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["sqlalchemy_check"] is True
