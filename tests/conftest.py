"""Pytest configuration and fixtures."""

import os

# Keep bcrypt cheap in tests; must be set before the app reads its settings
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.engine import make_url  # noqa: E402

from src.config import Settings  # noqa: E402
from src.database import Base, get_db  # noqa: E402
from src.main import create_app  # noqa: E402
from src.services.auth import TokenService  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the signed-up user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL", "").startswith("postgresql"):
    # Running in Docker - use a separate PostgreSQL test database
    url = make_url(os.environ["DATABASE_URL"])
    SQLALCHEMY_DATABASE_URL = url.set(database=f"{url.database}_test").render_as_string(
        hide_password=False
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

app = create_app(Settings(database_url=SQLALCHEMY_DATABASE_URL))
engine = app.state.engine
TestingSessionLocal = app.state.session_factory


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


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
def session_factory():
    """Sessionmaker bound to the test database, for tests needing several sessions."""
    return TestingSessionLocal


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
def api_app():
    """The application under test, built from the test settings."""
    return app


@pytest.fixture
def token_service() -> TokenService:
    """The token service the app signs with."""
    return app.state.token_service


@pytest.fixture
def auth_headers(client):
    """Sign up a user and return auth headers with user info."""
    email = "test@example.com"
    response = client.post(
        "/api/signup",
        json={"name": "Test User", "email": email, "password": "testpass123"},
    )
    assert response.status_code == 201
    data = response.json()
    token = data["token"]
    user_id = data["user"]["id"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id, email=email)
