"""
Test configuration and fixtures for user-sessions.

- In-memory SQLite engine per test (or TEST_DATABASE_URL when set)
- Function-scoped database session
- TestClient with the get_db dependency overridden
- TestClient backed by the in-memory MockSessionStore
"""

import os
from typing import Generator

# Keep the import-time engine off the production database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from user_sessions.database import Base, get_db
from user_sessions.main import app
from user_sessions.models import User
from user_sessions.services.dependencies import get_session_store
from user_sessions.services.session_handler import SessionHandler
from tests.factories import create_user
from tests.fixtures.mocks import MockSessionStore


# =============================================================================
# Database Fixtures
# =============================================================================


def get_test_database_url() -> str:
    """
    Get the test database URL.

    Priority:
    1. TEST_DATABASE_URL environment variable
    2. In-memory SQLite shared across threads
    """
    return os.environ.get("TEST_DATABASE_URL", "sqlite://")


@pytest.fixture
def test_engine():
    """Create a fresh schema for each test and drop it afterwards."""
    database_url = get_test_database_url()

    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url)

    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(test_engine) -> Generator[Session, None, None]:
    """Provide a database session bound to the test engine."""
    TestingSessionLocal = sessionmaker(bind=test_engine, autoflush=False)
    session = TestingSessionLocal()

    yield session

    session.close()


# =============================================================================
# TestClient Fixtures
# =============================================================================


@pytest.fixture
def client(db: Session) -> Generator[TestClient, None, None]:
    """
    TestClient with database dependency override.

    The database session is injected into the app's get_db dependency, so
    requests go through the real SqlSessionStore.
    """

    def override_get_db():
        try:
            yield db
        finally:
            pass  # Don't close - managed by db fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def mock_store() -> MockSessionStore:
    return MockSessionStore()


@pytest.fixture
def mock_client(mock_store: MockSessionStore) -> Generator[TestClient, None, None]:
    """TestClient whose handler runs on the in-memory MockSessionStore."""
    app.dependency_overrides[get_session_store] = lambda: mock_store

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def handler(mock_store: MockSessionStore) -> SessionHandler:
    return SessionHandler(mock_store)


# =============================================================================
# Test Data Fixtures
# =============================================================================


@pytest.fixture
def test_user(db: Session) -> User:
    """Create a known user."""
    return create_user(db, username="test-user")
