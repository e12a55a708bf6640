# tests/conftest.py

"""
Shared fixtures for the Productos API tests.
The suite runs against a throwaway SQLite file; each test that writes runs
inside its own transaction, which is rolled back after the test completes.
"""

import logging
import os
import tempfile

# Must be set before productos_api.db builds its engine.
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite:///" + os.path.join(tempfile.gettempdir(), "productos_api_test.db"),
)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from productos_api.db import Base, SessionLocal, engine, get_db  # noqa: E402
from productos_api.main import app  # noqa: E402

# Suppress noisy logs from SQLAlchemy during tests for cleaner output
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@pytest.fixture(scope="session", autouse=True)
def setup_database_for_tests():
    # Start every session from empty tables
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session_for_test():
    """
    Provides a transactional database session for each test function and
    overrides the app's `get_db` dependency to use it. Everything the test
    writes is rolled back afterwards.
    """
    connection = engine.connect()
    transaction = connection.begin()
    db = SessionLocal(bind=connection)

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db

    try:
        yield db
    finally:
        transaction.rollback()
        db.close()
        connection.close()
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture(scope="module")
def client():
    """
    Provides a TestClient for the application.
    The TestClient runs the startup event, including the database check.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def producto(client: TestClient, db_session_for_test: Session):
    """A product created through the API, as returned in `data`."""
    response = client.post("/api/productos", json={"name": "Monitor Curvo", "price": 300})
    assert response.status_code == 201
    return response.json()["data"]
