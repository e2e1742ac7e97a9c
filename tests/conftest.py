"""Pytest configuration and fixtures."""

import os

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/codespaces", "/codespaces_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

# The app's own engine (used by startup table creation) must point at the same database
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from graphql_operations import CREATE_USER, GRAPHQL_URL, LOGIN  # noqa: E402
from src.database import Base, get_db  # noqa: E402
from src.main import app  # noqa: E402

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class GraphQLClient:
    """Thin wrapper that posts GraphQL operations through a TestClient."""

    def __init__(self, client: TestClient):
        self.client = client

    def execute(self, query: str, **variables) -> dict:
        response = self.client.post(GRAPHQL_URL, json={"query": query, "variables": variables})
        assert response.status_code == 200, response.text
        return response.json()

    @property
    def cookies(self):
        return self.client.cookies


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
def gql(client):
    """GraphQL client sharing the test client's cookie jar."""
    return GraphQLClient(client)


@pytest.fixture
def registered_user(gql):
    """Sign up alice and return the credentials."""
    credentials = {
        "name": "Alice",
        "username": "alice",
        "email": "alice@x.com",
        "password": "secret1",
    }
    body = gql.execute(CREATE_USER, input=credentials)
    assert body["data"]["createUser"] is True
    return credentials


@pytest.fixture
def logged_in(gql, registered_user):
    """Log alice in and return the user record from the login response."""
    body = gql.execute(
        LOGIN, identifier=registered_user["email"], password=registered_user["password"]
    )
    assert "errors" not in body, body
    return body["data"]["login"]
