"""
Test configuration and fixtures.
"""
import os
import pytest
from typing import Generator
from fastapi.testclient import TestClient

# Configure settings before importing the app
os.environ["SESSION_SECRET_KEY"] = "test-session-key-0123456789abcdefghijklmnop"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin123"

from spice_haven.main import app
from spice_haven.db.seed import create_store
from spice_haven.db.session import get_store
from spice_haven.db.store import DataStore


ADMIN_CREDENTIALS = {"username": "admin", "password": "admin123"}

VALID_RESERVATION = {
    "name": "A",
    "email": "a@b.com",
    "phone": "5551234567",
    "date": "2024-06-01",
    "time": "19:00",
    "guests": 2,
}


@pytest.fixture(scope="function")
def store() -> DataStore:
    """A freshly seeded store for each test."""
    return create_store()


@pytest.fixture(scope="function")
def empty_store() -> DataStore:
    """A store with no records at all."""
    return DataStore()


@pytest.fixture(scope="function")
def client(store: DataStore) -> Generator[TestClient, None, None]:
    """Create test client with the store dependency overridden."""
    def override_get_store():
        return store

    app.dependency_overrides[get_store] = override_get_store

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client: TestClient) -> TestClient:
    """Test client holding a logged-in admin session cookie."""
    response = client.post("/api/login", json=ADMIN_CREDENTIALS)
    assert response.status_code == 200
    return client
