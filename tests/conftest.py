"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key-with-safe-length-32")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from artzy.database import Base, get_db, seed_categories
from artzy.main import app


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's details."""

    def __init__(
        self,
        *args,
        user_id: int | None = None,
        username: str = "",
        email: str = "",
        token: str = "",
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username
        self.email = email
        self.token = token


# Use test database - PostgreSQL when TEST_DATABASE_URL is set, SQLite locally
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "testpass123"


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()
    seed_categories(session)

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def foreign_keys(db):
    """Enforce foreign keys on SQLite connections for the duration of a test."""
    if engine.dialect.name != "sqlite":
        yield
        return

    def _enable(dbapi_connection, connection_record, connection_proxy):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    db.commit()
    event.listen(engine, "checkout", _enable)
    yield
    db.rollback()
    event.remove(engine, "checkout", _enable)
    # Drop pooled connections that still have the pragma set
    engine.dispose()


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


@pytest.fixture
def make_user(client):
    """Register and log in a user, returning auth headers with user info."""

    def _make_user(username: str, email: str | None = None) -> AuthHeaders:
        email = email or f"{username}@example.com"
        response = client.post(
            "/api/auth/register",
            json={"username": username, "email": email, "password": PASSWORD},
        )
        assert response.status_code == 201
        user_id = response.json()["user"]["id"]

        response = client.post("/api/auth/login", json={"email": email, "password": PASSWORD})
        assert response.status_code == 200
        token = response.json()["token"]

        return AuthHeaders(
            {"Authorization": f"Bearer {token}"},
            user_id=user_id,
            username=username,
            email=email,
            token=token,
        )

    return _make_user


@pytest.fixture
def auth_headers(make_user):
    """Auth headers for the default test user."""
    return make_user("alice")


@pytest.fixture
def other_headers(make_user):
    """Auth headers for a second user."""
    return make_user("bob")


@pytest.fixture
def create_artwork(client):
    """Create an artwork for the given headers and return its JSON."""

    def _create_artwork(headers, **overrides):
        payload = {
            "image": "https://img.example.com/sunset.jpg",
            "title": "Sunset",
            "artist": "Alice",
            "year": 2021,
            "category": "Painting",
            "description": "Evening light",
        }
        payload.update(overrides)
        response = client.post("/api/artworks", headers=headers, json=payload)
        assert response.status_code == 201
        return response.json()

    return _create_artwork
