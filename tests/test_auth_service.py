"""Identity service tests: hashing, registration, login and token checks."""

import base64
import json
from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from tasktrack.config import get_settings
from tasktrack.exceptions import (
    DuplicateEmail,
    InvalidCredentials,
    InvalidToken,
    MissingToken,
    UserNotFound,
)
from tasktrack.models import User
from tasktrack.services import auth as auth_service
from tasktrack.services.auth import (
    authenticate_user,
    create_access_token,
    get_password_hash,
    login,
    register_user,
    verify_password,
    verify_token,
)


def _b64(data: dict) -> str:
    raw = json.dumps(data).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def test_password_hash_is_salted():
    first = get_password_hash("hunter22")
    second = get_password_hash("hunter22")

    assert first != second
    assert first != "hunter22"
    assert verify_password("hunter22", first)
    assert verify_password("hunter22", second)
    assert not verify_password("hunter23", first)


def test_register_user(db):
    user = register_user(db, "Alice", "alice@example.com", "pw")

    assert user.id
    assert user.password_hash != "pw"
    assert db.query(User).count() == 1


def test_register_duplicate_email_keeps_first_user(db):
    first = register_user(db, "Alice", "alice@example.com", "pw")

    with pytest.raises(DuplicateEmail):
        register_user(db, "Mallory", "alice@example.com", "other")

    users = db.query(User).all()
    assert len(users) == 1
    assert users[0].id == first.id
    assert users[0].name == "Alice"
    assert verify_password("pw", users[0].password_hash)


def test_register_race_hits_unique_index(db, monkeypatch):
    """A duplicate that slips past the lookup is still rejected by the store."""
    first = register_user(db, "Alice", "alice@example.com", "pw")
    monkeypatch.setattr(auth_service, "get_user_by_email", lambda db, email: None)

    with pytest.raises(DuplicateEmail):
        register_user(db, "Mallory", "alice@example.com", "other")

    # Session was rolled back and is still usable
    users = db.query(User).all()
    assert len(users) == 1
    assert users[0].id == first.id
    assert users[0].name == "Alice"


def test_authenticate_user(db):
    created = register_user(db, "Alice", "alice@example.com", "pw")

    assert authenticate_user(db, "alice@example.com", "pw").id == created.id

    with pytest.raises(InvalidCredentials):
        authenticate_user(db, "alice@example.com", "wrong")

    with pytest.raises(UserNotFound):
        authenticate_user(db, "bob@example.com", "pw")


def test_login_token_verifies(db):
    user = register_user(db, "Alice", "alice@example.com", "pw")

    token = login(db, "alice@example.com", "pw")

    assert verify_token(token) == user.id


def test_token_expires_after_configured_window():
    settings = get_settings()
    token = create_access_token("user-1")

    payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    assert payload["sub"] == "user-1"
    assert payload["exp"] - payload["iat"] == settings.jwt_expiration_minutes * 60


def test_expired_token_rejected():
    token = create_access_token("user-1", expires_delta=timedelta(seconds=-10))

    with pytest.raises(InvalidToken):
        verify_token(token)


def test_tampered_token_rejected():
    token = create_access_token("user-1")
    header, _, signature = token.split(".")
    forged_payload = _b64(
        {"sub": "user-2", "exp": int((datetime.now(UTC) + timedelta(hours=1)).timestamp())}
    )

    with pytest.raises(InvalidToken):
        verify_token(f"{header}.{forged_payload}.{signature}")


def test_token_signed_with_other_secret_rejected():
    token = jwt.encode(
        {"sub": "user-1", "exp": datetime.now(UTC) + timedelta(hours=1)},
        "some-other-secret",
        algorithm="HS256",
    )

    with pytest.raises(InvalidToken):
        verify_token(token)


def test_token_without_subject_rejected():
    settings = get_settings()
    token = jwt.encode(
        {"exp": datetime.now(UTC) + timedelta(hours=1)},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )

    with pytest.raises(InvalidToken):
        verify_token(token)


@pytest.mark.parametrize("token", [None, "", "   "])
def test_missing_token(token):
    with pytest.raises(MissingToken):
        verify_token(token)


def test_garbage_token_rejected():
    with pytest.raises(InvalidToken):
        verify_token("definitely.not.a-jwt")
