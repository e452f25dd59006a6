"""Pytest configuration and fixtures."""

import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime, timedelta
from typing import Any

# Settings are cached on first use, so the test environment is set before
# anything from the application is imported.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-hs256-signing-only")

import jwt  # noqa: E402
import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from ecommerce.config import Settings  # noqa: E402
from ecommerce.core import configure_container  # noqa: E402
from ecommerce.database import Base, get_db, scan_mappers  # noqa: E402
from ecommerce.domain.identity.entities.user import User  # noqa: E402
from ecommerce.infrastructure.identity.repositories.user_repository import (  # noqa: E402
    UserRepository,
)
from ecommerce.main import app, create_app  # noqa: E402

TEST_SECRET_KEY = os.environ["SECRET_KEY"]

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

scan_mappers()


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    configure_container(app.state.settings)
    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_user(db_session: Session) -> User:
    """Persist a user for lookups."""
    return UserRepository(db_session).save(
        User.create(username="alice", email="alice@example.com", phone="13800000000")
    )


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Build signed tokens the way the auth server would."""

    def _make(
        subject: object = 1,
        *,
        token_type: str = "access",
        expires_in: timedelta = timedelta(minutes=15),
        secret: str = TEST_SECRET_KEY,
    ) -> str:
        payload: dict[str, Any] = {"exp": datetime.now(UTC) + expires_in, "type": token_type}
        if subject is not None:
            payload["sub"] = str(subject)
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make


@pytest.fixture
def build_app() -> Generator[Callable[..., FastAPI], None, None]:
    """Build standalone applications from explicit settings."""

    def _build(**overrides: Any) -> FastAPI:
        values: dict[str, Any] = {
            "ENVIRONMENT": "test",
            "DATABASE_URL": TEST_DATABASE_URL,
            "SECRET_KEY": TEST_SECRET_KEY,
            **overrides,
        }
        return create_app(Settings(_env_file=None, **values))

    yield _build
    configure_container(app.state.settings)
