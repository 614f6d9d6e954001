"""Shared pytest fixtures for the MongoDB-backed API."""

from __future__ import annotations

import sys
from pathlib import Path

import mongomock
import pytest

# Ensure the application package is importable during tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from solosphere.database import create_indexes  # noqa: E402
from solosphere.main import create_app  # noqa: E402

TEST_SECRET = "test-access-token-secret"


@pytest.fixture(autouse=True)
def mongo_db():
    """Provide an isolated in-memory MongoDB database for each test."""
    test_db_name = "test_solosphere"

    client = mongomock.MongoClient()
    db = client[test_db_name]
    create_indexes(db)

    yield db

    client.drop_database(test_db_name)


@pytest.fixture
def app(mongo_db):
    """Flask app wired to the in-memory database."""
    app = create_app(
        config={
            "TESTING": True,
            "ACCESS_TOKEN_SECRET": TEST_SECRET,
            "PRODUCTION": False,
            "CLIENT_ORIGIN": "http://localhost:5173",
        },
        database=mongo_db,
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    """Return a helper that issues a session cookie for the given email."""

    def _login(email: str, **claims):
        response = client.post("/jwt", json={"email": email, **claims})
        assert response.status_code == 200
        return response

    return _login
