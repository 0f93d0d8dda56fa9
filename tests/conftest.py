"""
Test configuration and fixtures for the Chirpy API.
This centralizes all test setup, making individual tests clean.
"""

import os
from pathlib import Path

# Settings are read at import time, so configure them before importing the app
os.environ["DB_URL"] = "sqlite:///./test.db"
os.environ["PLATFORM"] = "dev"
os.environ["FILEPATH_ROOT"] = str(Path(__file__).resolve().parent.parent)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from main import app
from chirpy_app.database.connection import Base, get_db
from chirpy_app.metrics.hit_counter import hit_counter
from chirpy_app.storage.strategies import InMemoryRepository

# Test database configuration
SQLALCHEMY_DATABASE_URL = os.environ["DB_URL"]
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def reset_hit_counter():
    """Every test starts with zero hits."""
    hit_counter.reset()
    yield
    hit_counter.reset()


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    # Import models so they are registered with Base
    import chirpy_app.models  # noqa: F401

    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database dependency overridden.
    This is the main fixture that tests will use.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def memory_repository():
    return InMemoryRepository()
