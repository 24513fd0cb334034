"""
Test configuration and fixtures for FastAPI URL shortener.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from main import app
from link_shortener.database.connection import Base
from link_shortener.dependencies import get_mapping_store
from link_shortener.storage.strategies import SQLAlchemyMappingStore

# Test database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    # Create tables
    Base.metadata.create_all(bind=engine)

    # Create session
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        # Cleanup
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def store(db_session):
    """Mapping store backed by the test database"""
    return SQLAlchemyMappingStore(db_session)


@pytest.fixture(scope="function")
def client(store):
    """
    Create a test client with the mapping store dependency overridden.
    This is the main fixture that tests will use.
    """
    def override_get_mapping_store():
        yield store

    # Override the storage dependency
    app.dependency_overrides[get_mapping_store] = override_get_mapping_store

    # Create test client
    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()
