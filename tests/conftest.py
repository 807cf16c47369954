"""Pytest configuration and fixtures."""

import os

# Configure before the application modules read their settings
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from tasktrack.database import Base, build_engine, get_db  # noqa: E402
from tasktrack.main import app  # noqa: E402
from tasktrack.models import User  # noqa: E402
from tasktrack.services.auth import get_password_hash  # noqa: E402

SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]

engine = build_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield
    # Leave the file for the next run; each test cleans up after itself


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_and_login(client, name: str, email: str, password: str) -> AuthHeaders:
    """Sign a user up through the API and return their auth headers."""
    response = client.post("/signup", json={"name": name, "email": email, "password": password})
    assert response.status_code == 201
    user_id = response.json()["id"]

    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200
    token = response.json()["token"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id, email=email)


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register_and_login(client, "Test User", "test@example.com", "testpass123")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return register_and_login(client, "Other User", "other@example.com", "otherpass123")


@pytest.fixture
def make_user(db):
    """Insert a user directly, bypassing the API."""

    def _make_user(email: str = "owner@example.com", name: str = "Owner") -> User:
        user = User(name=name, email=email, password_hash=get_password_hash("secret123"))
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user
