"""Database engine and session management."""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from workout_builder.config import get_settings
from workout_builder.db.models import Base

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_engine(
            settings.database_url,
            echo=False,
            future=True,
        )
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """Get or create the session factory."""
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_factory


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Get a database session as a context manager.

    Commits on success, rolls back and re-raises on any error.
    """
    factory = get_session_factory()
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def create_tables(engine: Engine | None = None) -> None:
    """Create all database tables."""
    Base.metadata.create_all(engine or get_engine())


def drop_tables(engine: Engine | None = None) -> None:
    """Drop all database tables (use with caution!)."""
    Base.metadata.drop_all(engine or get_engine())


def init_db(engine: Engine | None = None) -> None:
    """Initialize the database with tables and seed data."""
    from workout_builder.db.seed_data import seed_library

    create_tables(engine)
    if engine is None:
        with get_session() as session:
            seed_library(session)
        return

    factory = sessionmaker(engine, class_=Session, expire_on_commit=False)
    with factory() as session:
        seed_library(session)
        session.commit()
