"""Tests for health check endpoints."""


def test_health_check(client):
    """Test basic health check."""
    response = client.get("/api/v1/health/")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_readiness_check_without_cache(client):
    """Test readiness reports the database and skips the disabled cache."""
    response = client.get("/api/v1/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["database"] is True
    assert data["checks"]["redis"] == "skipped"


def test_root_endpoint(client):
    """Test root endpoint returns API info."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert "name" in data
    assert "version" in data
    assert "docs" in data


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/v1/nowhere")

    assert response.status_code == 404
    assert "error" in response.json()
