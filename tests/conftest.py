"""Pytest configuration and fixtures."""

from unittest.mock import patch

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from workout_builder.config import Settings, get_settings
from workout_builder.context import create_context
from workout_builder.db.models import Base


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings():
    """Provide settings that ignore any local .env file."""
    return Settings(_env_file=None, database_url="sqlite://")


@pytest.fixture
def test_engine():
    """Create an in-memory SQLite database engine shared across threads."""
    engine = create_engine(
        "sqlite://",
        echo=False,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Create a session factory bound to the test engine."""
    return sessionmaker(test_engine, class_=Session, expire_on_commit=False)


@pytest.fixture
def test_session(test_session_factory):
    """Provide a test database session that auto-commits."""
    session = test_session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture
def seeded_test_session(test_session):
    """Provide a test session with the starter exercise library."""
    from workout_builder.db.seed_data import seed_library

    seed_library(test_session)
    return test_session


@pytest.fixture
def test_context(test_settings, test_engine):
    """Provide an application context bound to the test engine."""
    return create_context(test_settings, engine=test_engine, seed=42)


@pytest.fixture
def client(test_context):
    """Provide a TestClient whose lifespan uses the test context."""
    from fastapi.testclient import TestClient

    from workout_builder.server.app import app

    with patch("workout_builder.server.app.create_context", return_value=test_context):
        with TestClient(app) as test_client:
            yield test_client
