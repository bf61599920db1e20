"""
Health endpoint tests.
"""

import pytest
from fastapi.testclient import TestClient

from careconnect.app import app


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    return TestClient(app)


def test_health_endpoint(client):
    """Test that the /health endpoint returns 200 OK."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert "data" in data
    assert data["data"]["status"] == "healthy"
    assert "timestamp" in data["data"]
    assert "version" in data["data"]
    assert data["data"]["service"] == "CareConnect"


def test_root_endpoint(client):
    """Test that the root endpoint returns API information."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "service" in data
    assert "version" in data
    assert data["status"] == "running"
    assert data["endpoints"]["submit_query"] == "POST /queries/"


def test_unknown_route_is_404(client):
    assert client.get("/no-such-route").status_code == 404
