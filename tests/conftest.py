"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src import models  # noqa: F401
from src.database import Base, get_db
from src.exceptions import UploadFailedError
from src.main import app
from src.services.image_storage import get_image_storage


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


class FakeImageStorage:
    """Records uploads and hands back predictable URLs."""

    def __init__(self):
        self.uploads: list[tuple[str, bytes]] = []
        self.fail = False

    async def upload(self, image_data, namespace, filename="upload", content_type=None):
        if self.fail:
            raise UploadFailedError()
        self.uploads.append((namespace, image_data))
        folder = f"taskapp/{namespace}"
        return f"https://res.cloudinary.com/demo/image/upload/{folder}/{len(self.uploads)}.jpg"


# PostgreSQL when TEST_DATABASE_URL is set, SQLite otherwise
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


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


@pytest.fixture
def image_storage():
    return FakeImageStorage()


@pytest.fixture(scope="function")
def client(db, image_storage):
    """Create a test client with database and image storage overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_storage] = lambda: image_storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _register_and_login(client, email, password="testpass123", name="Test User"):
    """Sign up a user, log in, and return auth headers."""
    response = client.post("/signup", json={"name": name, "email": email, "password": password})
    assert response.status_code == 200

    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200
    token = response.json()["token"]

    me = client.get("/me", headers={"Authorization": f"Bearer {token}"})
    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=me.json()["id"], email=email)


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return _register_and_login(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return _register_and_login(client, "other@example.com", name="Other User")
