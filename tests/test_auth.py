"""
Tests for registration, login, logout and the session gate.
"""
import pytest

from tests.helpers import PASSWORD, USERNAME


def register(client, username=USERNAME, password=PASSWORD):
    return client.post("/api/auth/register", json={"username": username, "password": password})


def login(client, username=USERNAME, password=PASSWORD):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def test_register_returns_new_user_id(client):
    response = register(client)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["userId"] >= 1


def test_register_same_username_twice_is_a_conflict(client):
    assert register(client).status_code == 201

    response = register(client, password="Other456")

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error_type"] == "conflict"
    assert body["message"] == "Username already exists"


def test_register_lists_every_invalid_field(client):
    response = register(client, username="abc123", password="short")

    assert response.status_code == 400
    body = response.json()
    assert body["error_type"] == "validation_failed"
    assert body["message"] == "Validation failed"
    errors = {error["field"]: error["type"] for error in body["errors"]}
    assert errors == {"username": "invalid_username", "password": "weak_password"}


def test_login_sets_session_reflected_by_status(client):
    register(client)

    response = login(client)

    assert response.status_code == 200
    assert response.json()["data"]["user"]["username"] == USERNAME
    status = client.get("/api/auth/status").json()
    assert status["success"] is True
    assert status["data"]["authenticated"] is True
    assert status["data"]["user"]["username"] == USERNAME


@pytest.mark.parametrize(
    "username,password",
    [(USERNAME, "Wrong999"), ("Nobody", PASSWORD)],
)
def test_bad_credentials_get_the_same_answer(client, username, password):
    register(client)

    response = login(client, username=username, password=password)

    assert response.status_code == 401
    body = response.json()
    assert body["error_type"] == "invalid_credentials"
    assert body["message"] == "Invalid username or password"
    assert client.get("/api/auth/status").json()["data"]["authenticated"] is False


def test_login_requires_both_fields(client):
    response = client.post("/api/auth/login", json={"username": "", "password": ""})

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"username", "password"}


def test_login_does_not_trim_the_username(client):
    register(client)

    response = login(client, username=f" {USERNAME} ")

    assert response.status_code == 401
    assert response.json()["error_type"] == "invalid_credentials"


def test_login_again_replaces_the_previous_session(auth_client, session_store):
    assert len(session_store) == 1

    assert login(auth_client).status_code == 200

    assert len(session_store) == 1
    assert auth_client.get("/api/auth/status").json()["data"]["authenticated"] is True


def test_status_when_anonymous(client):
    response = client.get("/api/auth/status")

    assert response.status_code == 200
    assert response.json()["data"] == {"authenticated": False, "user": None}


def test_logout_destroys_session(auth_client, session_store):
    assert len(session_store) == 1

    response = auth_client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json()["message"] == "Logout successful"
    assert len(session_store) == 0
    assert auth_client.get("/api/auth/status").json()["data"]["authenticated"] is False
    assert auth_client.get("/api/cars").status_code == 401


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/api/cars"),
        ("post", "/api/cars"),
        ("get", "/api/packages/1"),
        ("delete", "/api/services/1"),
        ("put", "/api/payments/1"),
        ("get", "/api/bill/1"),
        ("get", "/api/reports/dashboard"),
        ("get", "/api/reports/daily/2024-01-10"),
    ],
)
def test_protected_routes_require_a_session(client, method, path):
    response = client.request(method, path, json={})

    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "message": "Authentication required",
        "error_type": "unauthorized",
    }


def test_forged_session_cookie_is_anonymous(client):
    register(client)
    client.cookies.set("cwsms_session", "forged.value.here")

    assert client.get("/api/cars").status_code == 401


def test_health_is_public(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
