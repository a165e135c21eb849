"""
Tests for the health endpoints.
"""

from datetime import datetime


def test_health_check(client):
    """GET /api/health answers OK with an ISO timestamp."""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert datetime.fromisoformat(data["timestamp"]).tzinfo is not None


def test_detailed_health_reports_database(client):
    response = client.get("/api/health/detailed")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert data["services"] == {"api": "healthy", "database": "healthy"}


def test_unknown_route_returns_error_body(client):
    """Unmatched routes use the common error envelope."""
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}
