"""
Tests for authentication endpoints.
"""
from fastapi.testclient import TestClient

from spice_haven.core.config import get_settings
from spice_haven.db.store import DataStore
from tests.conftest import ADMIN_CREDENTIALS


class TestLogin:
    """Tests for POST /api/login."""

    def test_login_success(self, client: TestClient):
        response = client.post("/api/login", json=ADMIN_CREDENTIALS)

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["username"] == "admin"
        assert data["user"]["role"] == "admin"
        assert "password" not in data["user"]
        assert get_settings().SESSION_COOKIE_NAME in response.cookies

    def test_login_wrong_password(self, client: TestClient):
        response = client.post("/api/login", json={"username": "admin", "password": "wrong"})

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials"}

    def test_login_nonexistent_user(self, client: TestClient):
        response = client.post("/api/login", json={"username": "nobody", "password": "admin123"})

        assert response.status_code == 401

    def test_login_missing_fields(self, client: TestClient):
        response = client.post("/api/login", json={"username": "admin"})

        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Invalid data"
        assert data["errors"][0]["path"] == ["password"]


class TestAuthCheck:
    """Tests for GET /api/auth/check."""

    def test_check_anonymous(self, client: TestClient):
        response = client.get("/api/auth/check")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False}

    def test_check_authenticated(self, auth_client: TestClient):
        response = auth_client.get("/api/auth/check")

        assert response.status_code == 200
        data = response.json()
        assert data["authenticated"] is True
        assert data["user"]["username"] == "admin"

    def test_check_with_tampered_cookie(self, client: TestClient):
        client.cookies.set(get_settings().SESSION_COOKIE_NAME, "invalid.token.here")

        response = client.get("/api/auth/check")

        assert response.json() == {"authenticated": False}


class TestLogout:
    """Tests for POST /api/logout."""

    def test_logout_ends_session(self, auth_client: TestClient):
        response = auth_client.post("/api/logout")

        assert response.status_code == 200
        assert "logged out" in response.json()["message"].lower()
        assert auth_client.get("/api/auth/check").json() == {"authenticated": False}

    def test_logout_revokes_token(self, auth_client: TestClient, store: DataStore):
        cookie_name = get_settings().SESSION_COOKIE_NAME
        token = auth_client.cookies.get(cookie_name)

        auth_client.post("/api/logout")

        # Replaying the old cookie must not work
        auth_client.cookies.set(cookie_name, token)
        response = auth_client.get("/api/reservations")

        assert response.status_code == 401
        assert store.revoked_sessions.is_revoked(token)

    def test_logout_without_session(self, client: TestClient):
        response = client.post("/api/logout")

        assert response.status_code == 200


class TestCreateUser:
    """Tests for POST /api/users."""

    def test_requires_auth(self, client: TestClient):
        response = client.post("/api/users", json={"username": "chef", "password": "tandoor123"})

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized"}

    def test_create_user_and_login(self, auth_client: TestClient, store: DataStore):
        response = auth_client.post("/api/users", json={"username": "chef", "password": "tandoor123"})

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "chef"
        assert data["role"] == "staff"
        assert "password" not in data

        # Stored hashed
        assert store.users.get_by_username("chef").password != "tandoor123"

        login = auth_client.post("/api/login", json={"username": "chef", "password": "tandoor123"})
        assert login.status_code == 200

    def test_duplicate_username_conflict(self, auth_client: TestClient):
        response = auth_client.post("/api/users", json={"username": "admin", "password": "another123"})

        assert response.status_code == 409
        assert "already taken" in response.json()["message"]

    def test_deleted_user_session_rejected(self, auth_client: TestClient, store: DataStore):
        admin = store.users.get_by_username("admin")
        store.users.delete(admin.id)

        response = auth_client.get("/api/reservations")

        assert response.status_code == 401
