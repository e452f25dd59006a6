"""Database configuration, session management and mapper scanning."""

import importlib
import pkgutil
from collections.abc import Generator
from types import ModuleType
from typing import Annotated

import structlog
from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ecommerce.config import Settings, get_settings

logger = structlog.get_logger(__name__)

# Package holding the ORM mappings picked up by scan_mappers()
MAPPER_PACKAGE = "ecommerce.dao"


class Base(DeclarativeBase):
    """Base class for all database models."""


# Module-level singletons (application-scoped)
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def initialize_database(settings: Settings) -> None:
    """Initialize database engine and session factory once at startup."""
    global _engine, _session_factory  # noqa: PLW0603

    if settings.DATABASE_URL.startswith("sqlite"):
        _engine = create_engine(
            settings.DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        _engine = create_engine(
            settings.DATABASE_URL,
            pool_size=20,
            max_overflow=30,
            pool_pre_ping=True,
            pool_recycle=3600,
        )

    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def scan_mappers(package: str = MAPPER_PACKAGE) -> list[str]:
    """
    Import every module of the mapper package.

    ORM classes register themselves on ``Base.metadata`` at import time, so
    this must run before tables are created or queried.

    Returns:
        Fully qualified names of the imported modules
    """
    root: ModuleType = importlib.import_module(package)
    scanned = [root.__name__]

    for module_info in pkgutil.walk_packages(root.__path__, prefix=f"{root.__name__}."):
        importlib.import_module(module_info.name)
        scanned.append(module_info.name)

    logger.debug("mappers_scanned", package=package, modules=scanned)
    return scanned


def create_tables() -> None:
    """Create all tables known to the declarative metadata."""
    Base.metadata.create_all(bind=get_engine())


def get_engine() -> Engine:
    """Get the singleton database engine."""
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Get session factory (returns singleton)."""
    if _session_factory is None:
        initialize_database(settings)

    if _session_factory is None:
        raise RuntimeError("Failed to initialize database session factory.")

    return _session_factory


def dispose_engine() -> None:
    """Dispose database engine on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """Get database session."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


# Type alias for database dependency
DatabaseSession = Annotated[Session, Depends(get_db)]
