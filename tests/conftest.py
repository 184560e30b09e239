"""Pytest configuration and fixtures."""

import os
import tempfile

# Settings are cached on first import, so the environment must be set before the app loads
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="storefront-uploads-"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from src.database import Base, SessionLocal, engine, get_db  # noqa: E402
from src.main import app  # noqa: E402
from src.services.auth import verify_token  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the signed-up user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = SessionLocal()

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


@pytest.fixture
def signup_user(client):
    """Register users through the API and return their session tokens."""

    def _signup(email: str = "test@example.com", password: str = "testpass123") -> str:
        response = client.post(
            "/signup",
            json={"username": "Test User", "email": email, "password": password},
        )
        assert response.status_code == 200
        return response.json()["token"]

    return _signup


@pytest.fixture
def auth_headers(signup_user):
    """Create a user and return auth headers with user info."""
    token = signup_user()
    identity = verify_token(token)
    return AuthHeaders({"auth-token": token}, user_id=identity.id, email="test@example.com")


@pytest.fixture
def product_payload():
    """Valid /addproduct body."""

    def _make(name: str = "Striped Blouse", **overrides):
        payload = {
            "name": name,
            "image": "http://localhost:4000/images/products_1.png",
            "category": "women",
            "new_price": 50.0,
            "old_price": 80.5,
        }
        payload.update(overrides)
        return payload

    return _make
