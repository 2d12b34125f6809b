"""
Shared test configuration.

The application reads its settings at import time, so the database URL is
pointed at a throwaway SQLite file before anything from ``carwash`` is imported.
"""
import asyncio
import os
import tempfile
from pathlib import Path

import pytest

_DB_DIR = tempfile.mkdtemp(prefix="carwash-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{Path(_DB_DIR) / 'test.db'}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

from fastapi.testclient import TestClient  # noqa: E402

from carwash.database import drop_db  # noqa: E402
from carwash.main import app  # noqa: E402
from carwash.sessions import InMemorySessionStore, get_session_store  # noqa: E402
from tests.helpers import PASSWORD, USERNAME, create_car, create_package, create_service  # noqa: E402


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def client(session_store):
    """Anonymous client against a fresh schema."""
    app.dependency_overrides[get_session_store] = lambda: session_store
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
        asyncio.run(drop_db())


@pytest.fixture
def auth_client(client):
    """Client holding a signed-in session."""
    response = client.post("/api/auth/register", json={"username": USERNAME, "password": PASSWORD})
    assert response.status_code == 201
    response = client.post("/api/auth/login", json={"username": USERNAME, "password": PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def serviced_car(auth_client):
    """One car, one package and one unpaid service linking them."""
    assert create_car(auth_client).status_code == 201
    assert create_package(auth_client).status_code == 201
    assert create_service(auth_client).status_code == 201
    return auth_client
