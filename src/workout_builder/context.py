"""Application context - central container for shared dependencies."""

import logging
import random
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from workout_builder.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Container for application-wide dependencies.

    Initialize once at app startup via create_context().
    """

    settings: Settings
    engine: Engine
    session_factory: sessionmaker[Session]
    rng: random.Random = field(default_factory=random.Random)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Get a database session as a context manager."""
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


def create_context(
    settings: Settings | None = None,
    engine: Engine | None = None,
    seed: int | None = None,
) -> AppContext:
    """Create and return a fully initialized application context."""
    logger.info("Creating application context")

    if settings is None:
        from workout_builder.config import get_settings

        settings = get_settings()

    if engine is None:
        # Sessions are used from worker threads
        connect_args = {"check_same_thread": False} if settings.is_sqlite else {}
        engine = create_engine(
            settings.database_url, echo=False, future=True, connect_args=connect_args
        )
        logger.debug(f"Database engine created: {settings.database_url}")

    session_factory = sessionmaker(engine, class_=Session, expire_on_commit=False)

    logger.info("Application context created successfully")

    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=session_factory,
        rng=random.Random(seed),
    )
