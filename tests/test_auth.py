"""
Tests for admin login and product write protection.
"""

from datetime import timedelta

from evplanner.services.auth import AuthService


def test_login_returns_token(client):
    response = client.post("/api/auth/login", data={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["username"] == "admin"
    assert data["access_token"]


def test_login_wrong_password(client):
    response = client.post("/api/auth/login", data={"username": "admin", "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"error": "Incorrect username or password"}


def test_me_requires_token(client, admin_headers):
    assert client.get("/api/auth/me").status_code == 401

    response = client.get("/api/auth/me", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["username"] == "admin"


def test_invalid_token_rejected(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_expired_token_rejected(client):
    token = AuthService.create_access_token({"sub": "1"}, expires_delta=timedelta(minutes=-1))
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
