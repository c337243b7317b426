"""Auth and account API tests."""

from datetime import timedelta
from unittest.mock import MagicMock

from src.services.auth import create_access_token


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_signup(client):
    """Test user signup."""
    response = client.post(
        "/signup",
        json={"name": "New User", "email": "newuser@example.com", "password": "password123"},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Signup successful"}


def test_signup_duplicate_email(client, auth_headers):
    """Test signup with an email that is already taken."""
    response = client.post(
        "/signup",
        json={"name": "Duplicate", "email": auth_headers.email, "password": "password123"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Email already registered"


def test_signup_missing_field(client):
    response = client.post("/signup", json={"name": "No Email", "password": "password123"})
    assert response.status_code == 400
    assert "email" in response.json()["message"]


def test_login(client, auth_headers):
    """Test user login returns a usable token."""
    response = client.post("/login", json={"email": auth_headers.email, "password": "testpass123"})
    assert response.status_code == 200
    token = response.json()["token"]

    me = client.get("/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == auth_headers.user_id


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post("/login", json={"email": auth_headers.email, "password": "wrongpass"})
    assert response.status_code == 400
    assert response.json()["message"] == "Wrong password"


def test_login_unknown_email(client):
    response = client.post("/login", json={"email": "nobody@example.com", "password": "whatever"})
    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_get_current_user(client, auth_headers):
    """Test getting current user info without the password hash."""
    response = client.get("/me", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["email"] == auth_headers.email
    assert data["name"] == "Test User"
    assert data["hobbies"] == []
    assert data["profilePicture"] is None
    assert "password" not in data
    assert "password_hash" not in data


def test_get_current_user_deleted_out_of_band(client, auth_headers, db):
    from src.models.user import User

    db.query(User).filter(User.id == auth_headers.user_id).delete()
    db.commit()

    response = client.get("/me", headers=auth_headers)
    assert response.status_code == 404


def test_missing_token(client):
    """Test that endpoints require authentication."""
    response = client.get("/me")
    assert response.status_code == 401
    assert response.json()["message"] == "No token"


def test_token_without_bearer_prefix(client, auth_headers):
    token = auth_headers["Authorization"].removeprefix("Bearer ")

    response = client.get("/me", headers={"Authorization": token})
    assert response.status_code == 401
    assert response.json()["message"] == "No token"

    response = client.get("/me", headers={"Authorization": f"bearer {token}"})
    assert response.status_code == 401


def test_invalid_token(client):
    response = client.get("/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


def test_expired_token(client, auth_headers):
    token = create_access_token(auth_headers.user_id, expires_delta=timedelta(seconds=-1))
    response = client.get("/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


def test_token_signed_with_other_secret(client, auth_headers):
    token = create_access_token(auth_headers.user_id, secret="someone-elses-secret")
    response = client.get("/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_signup_rejects_invalid_email(client):
    response = client.post(
        "/signup", json={"name": "Bad Email", "email": "not-an-email", "password": "password123"}
    )
    assert response.status_code == 400
    assert "email" in response.json()["message"]


def test_database_failure_returns_json_500(client, auth_headers):
    """Store errors on read paths come back as the generic JSON body."""
    from sqlalchemy.exc import OperationalError

    from src.database import get_db
    from src.main import app

    broken = MagicMock()
    broken.query.side_effect = OperationalError("SELECT 1", {}, Exception("connection lost"))
    app.dependency_overrides[get_db] = lambda: broken

    responses = [
        client.get("/GetDailyTasks", headers=auth_headers),
        client.get("/GetTaskHistory", headers=auth_headers),
        client.get("/me", headers=auth_headers),
        client.post("/login", json={"email": auth_headers.email, "password": "testpass123"}),
    ]

    for response in responses:
        assert response.status_code == 500
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"message": "Server error"}
