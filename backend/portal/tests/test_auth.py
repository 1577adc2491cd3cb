"""
Tests for authentication endpoints.
"""
from portal.models import User


def register_payload(**overrides):
    payload = {
        "full_name": "Alice Example",
        "email": "alice@example.com",
        "password": "secret123",
        "student_id": "S1",
        "course": "Computer Science",
        "year_of_study": 2
    }
    payload.update(overrides)
    return payload


def test_register(client):
    """Registration creates a STUDENT and returns a token."""
    response = client.post("/api/auth/register", json=register_payload())
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["token"]
    user = body["data"]["user"]
    assert user["role"] == "STUDENT"
    assert user["email"] == "alice@example.com"
    assert "password" not in user
    assert "hashed_password" not in user


def test_register_duplicate_email(client):
    client.post("/api/auth/register", json=register_payload())
    response = client.post("/api/auth/register", json=register_payload(student_id="S2"))
    assert response.status_code == 409
    assert response.json()["success"] is False


def test_register_duplicate_student_id(client):
    client.post("/api/auth/register", json=register_payload())
    response = client.post("/api/auth/register", json=register_payload(email="other@example.com"))
    assert response.status_code == 409


def test_register_validation(client, db):
    response = client.post("/api/auth/register", json=register_payload(year_of_study=5))
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation failed"
    assert any(d["field"] == "year_of_study" for d in body["details"])
    assert db.query(User).count() == 0


def test_login(client):
    """Test user login."""
    client.post("/api/auth/register", json=register_payload())

    response = client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "secret123"}
    )
    assert response.status_code == 200
    assert response.json()["data"]["token"]


def test_login_invalid_credentials_do_not_leak(client):
    """Wrong password and unknown email fail identically."""
    client.post("/api/auth/register", json=register_payload())

    wrong_password = client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "wrongpassword"}
    )
    unknown_email = client.post(
        "/api/auth/login",
        json={"email": "nobody@example.com", "password": "wrongpassword"}
    )
    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_me_requires_token(client):
    response = client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json()["message"] == "No token provided"


def test_me_rejects_invalid_token(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


def test_me(client, student, student_headers):
    response = client.get("/api/auth/me", headers=student_headers)
    assert response.status_code == 200
    assert response.json()["data"]["user"]["id"] == student.id


def test_change_password(client):
    token = client.post("/api/auth/register", json=register_payload()).json()["data"]["token"]
    headers = {"Authorization": f"Bearer {token}"}

    response = client.post(
        "/api/auth/change-password",
        json={"current_password": "secret123", "new_password": "newsecret123"},
        headers=headers
    )
    assert response.status_code == 200

    old = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "secret123"})
    new = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "newsecret123"})
    assert old.status_code == 401
    assert new.status_code == 200

    # Existing tokens are not revoked
    assert client.get("/api/auth/me", headers=headers).status_code == 200


def test_change_password_wrong_current(client, student_headers):
    response = client.post(
        "/api/auth/change-password",
        json={"current_password": "not-my-password", "new_password": "newsecret123"},
        headers=student_headers
    )
    assert response.status_code == 401


def test_change_password_too_short(client, student_headers):
    response = client.post(
        "/api/auth/change-password",
        json={"current_password": "password123", "new_password": "short"},
        headers=student_headers
    )
    assert response.status_code == 400


def test_token_of_deleted_user_is_rejected(client, student_headers):
    assert client.delete("/api/users/account/delete", headers=student_headers).status_code == 200
    assert client.get("/api/auth/me", headers=student_headers).status_code == 401
