"""API tests: health endpoint."""
import pytest

pytestmark = pytest.mark.api


def test_api_health_returns_200(client):
    """GET /api/health returns 200 and service info."""
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "mylocations"}
