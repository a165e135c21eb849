"""
Tests for the users API.
"""


def test_create_and_list_users(client):
    response = client.post("/api/users", json={"name": "Ada", "email": "ada@example.com"})
    assert response.status_code == 201
    created = response.json()
    assert created["name"] == "Ada"
    assert created["email"] == "ada@example.com"
    assert "createdAt" in created

    client.post("/api/users", json={"name": "Grace", "email": "grace@example.com"})

    response = client.get("/api/users")
    assert response.status_code == 200
    users = response.json()
    # Newest first
    assert [u["name"] for u in users] == ["Grace", "Ada"]


def test_get_user_by_id(client):
    created = client.post("/api/users", json={"name": "Ada", "email": "ada@example.com"}).json()

    response = client.get(f"/api/users/{created['id']}")
    assert response.status_code == 200
    assert response.json()["email"] == "ada@example.com"


def test_get_missing_user_returns_404(client):
    response = client.get("/api/users/999")
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_duplicate_email_rejected(client):
    """A second user with the same email is refused and nothing is stored."""
    client.post("/api/users", json={"name": "Ada", "email": "ada@example.com"})

    response = client.post("/api/users", json={"name": "Other Ada", "email": "ada@example.com"})
    assert response.status_code == 400
    assert response.json() == {"error": "Email already exists"}

    assert len(client.get("/api/users").json()) == 1


def test_missing_fields_rejected(client):
    response = client.post("/api/users", json={"name": "Ada"})
    assert response.status_code == 400
    assert "email" in response.json()["error"]

    response = client.post("/api/users", json={"name": "", "email": "x@example.com"})
    assert response.status_code == 400

    assert client.get("/api/users").json() == []
