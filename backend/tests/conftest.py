import os

# Settings are read at import time; pin test values before the app loads
os.environ["ACCESS_TOKEN_SECRET"] = "test-secret"
os.environ["ENVIRONMENT"] = "development"

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.main import app
from app.utils.auth_utils import create_access_token
from thrive.db.database import get_database


@pytest.fixture(name="database")
def database_fixture():
    """Fresh in-memory Mongo database per test."""
    return AsyncMongoMockClient()["trip_thrive_test"]


@pytest.fixture(name="client")
def client_fixture(database):
    """Test client with the database dependency pointed at mongomock.

    Not used as a context manager, so the lifespan hook (real Mongo) never runs.
    """
    app.dependency_overrides[get_database] = lambda: database
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def login(client):
    """Set the auth cookie on the client for the given email."""
    def _login(email: str):
        client.cookies.set("token", create_access_token({"email": email}))
        return client
    return _login


@pytest.fixture
def anyio_backend():
    return "asyncio"
