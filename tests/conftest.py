"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
application at a throwaway in-memory SQLite database before anything imports
the settings.
"""

import os
import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"

import pytest
from fastapi.testclient import TestClient

from domain.models import Base, SessionLocal, engine


@pytest.fixture(scope="function")
def db_session():
    """
    Fresh schema and a session for every test.

    Yields:
        Session: SQLAlchemy database session bound to the in-memory engine
    """
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """TestClient sharing the test's database (lifespan is not started)."""
    from main import app

    return TestClient(app)
