"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from fraudscan_gateway.api.main import create_app
from fraudscan_gateway.api.dependencies import get_clock, get_scorer_registry
from fraudscan_gateway.domain.models import TransactionCandidate
from fraudscan_gateway.domain.registry import ScorerRegistry
from fraudscan_gateway.infrastructure.database.models import Base
from fraudscan_gateway.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeClock:
    """Manually advanced clock for deterministic velocity tests"""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 14, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(now: datetime) -> FakeClock:
    return FakeClock(now)


@pytest.fixture
def registry() -> ScorerRegistry:
    return ScorerRegistry()


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session, clock: FakeClock, registry: ScorerRegistry) -> TestClient:
    """Create FastAPI test client with test database, fake clock and a fresh scorer registry"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_scorer_registry] = lambda: registry
    return TestClient(app)


@pytest.fixture
def safe_candidate() -> TransactionCandidate:
    """Midday purchase that matches none of the fixed rules"""
    return TransactionCandidate(amount=120.0, time_of_day=12, location="NY", type="purchase")
