"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from lingodeck import models  # noqa: E402, F401
from lingodeck.core import container  # noqa: E402
from lingodeck.database import Base, get_db  # noqa: E402
from lingodeck.infrastructure.common.rate_limit import limiter  # noqa: E402
from lingodeck.main import app  # noqa: E402
from tests.fakes import FakeGenerationProvider  # noqa: E402

# Test database URL (in-memory SQLite shared across threads)
TEST_DATABASE_URL = "sqlite://"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


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
def fake_provider() -> FakeGenerationProvider:
    """Generation provider returning ten cards, every call succeeding."""
    return FakeGenerationProvider()


@pytest.fixture
def client(
    db_session: Session, fake_provider: FakeGenerationProvider
) -> Generator[TestClient, Any, None]:
    """Create a test client with database session and fake generation provider."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    container.ai_service.override(fake_provider)
    limiter.reset()

    with TestClient(app) as test_client:
        yield test_client

    container.ai_service.reset_override()
    app.dependency_overrides.clear()
