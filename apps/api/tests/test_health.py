"""Tests for the health check endpoint."""

import pytest
from fastapi.testclient import TestClient


@pytest.mark.unit
def test_health_check(client: TestClient) -> None:
    """Test the health check endpoint returns 200."""
    response = client.get("/health")
    assert response.status_code == 200


@pytest.mark.unit
def test_health_check_response_schema(client: TestClient) -> None:
    """Test the health check endpoint response has correct schema."""
    response = client.get("/health")
    data = response.json()

    assert data["status"] == "ok"
    assert isinstance(data["version"], str)
    assert data["message"] == "API is healthy"
    assert data["user_count"] == 0


@pytest.mark.unit
def test_health_check_counts_users(client: TestClient) -> None:
    client.post("/users", json={"name": "A", "email": "a@x.com"})
    client.post("/users", json={"name": "B", "email": "b@x.com"})

    assert client.get("/health").json()["user_count"] == 2
