"""
- Spins up temp test DB
- Create tables before tests run
- Provide a db_session fixture and override FastAPI’s get_db so routes use the test session.
- Provide a client fixture (TestClient(app)) that already has the DB override applied.
"""
import os
import pytest
from typing import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure the app does NOT run dev-only startup hooks (e.g., auto-create tables against real DB)
os.environ.setdefault("APP_ENV", "test")

from xordle.db import Base, get_db
from xordle.main import app
from xordle import models  # noqa: F401  registers the tables on Base

# Use SQLite in-memory for tests (fast, isolated)
TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"

@pytest.fixture(scope="session")
def engine():
    # StaticPool + check_same_thread=False lets Starlette's TestClient and SQLAlchemy
    # share ONE in-memory SQLite database across threads.
    engine = create_engine(
        TEST_DATABASE_URL,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db_session(engine) -> Generator:
    """Provide a clean session per test with rollback."""
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    db = TestingSessionLocal()
    try:
        yield db
        db.rollback()
    finally:
        db.close()

@pytest.fixture(autouse=True)
def _clean_db(engine):
    """
    Keep tests independent:
    The storage commits on every set(), so data would leak between tests.
    """
    with engine.begin() as conn:
        conn.execute(text("DELETE FROM round_state"))
    yield

@pytest.fixture(autouse=True)
def override_dep(db_session):
    """Force the app to use our test session for every request."""
    def _get_db_for_tests():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = _get_db_for_tests
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    # Every request uses the SQLite in-memory session instead of the configured database.
    return TestClient(app)
