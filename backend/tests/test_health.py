from datetime import datetime

from fastapi.testclient import TestClient

from gemini_gateway.core.config import Settings
from gemini_gateway.main import create_app


def test_health_is_up(client):
    resp = client.get("/health")
    assert resp.status_code == 200, resp.text

    body = resp.json()
    assert body["status"] == "UP"
    assert body["service"] == "Gemini Integration API"


def test_health_timestamp_is_iso_utc(client):
    ts = client.get("/health").json()["timestamp"]

    assert ts.endswith("Z")
    parsed = datetime.fromisoformat(ts.replace("Z", "+00:00"))
    assert parsed.utcoffset().total_seconds() == 0


def test_health_makes_no_remote_call(client, stub):
    client.get("/health")
    client.get("/health")
    assert stub.calls == []


def test_health_echoes_request_id(client):
    resp = client.get("/health", headers={"x-request-id": "abc-123"})
    assert resp.headers["x-request-id"] == "abc-123"


def test_cors_allows_any_origin_by_default(client):
    resp = client.get("/health", headers={"origin": "http://example.com"})
    assert resp.headers["access-control-allow-origin"] == "*"


def test_cors_explicit_origins_allow_credentials(stub):
    settings = Settings(_env_file=None, API_KEY="test-key", CORS_ALLOW_ORIGINS="http://a.test, http://b.test")
    client = TestClient(create_app(settings=settings, provider=stub))

    resp = client.get("/health", headers={"origin": "http://a.test"})

    assert resp.headers["access-control-allow-origin"] == "http://a.test"
    assert resp.headers["access-control-allow-credentials"] == "true"


def test_cors_rejects_unlisted_origin(stub):
    settings = Settings(_env_file=None, CORS_ALLOW_ORIGINS="http://a.test")
    client = TestClient(create_app(settings=settings, provider=stub))

    resp = client.get("/health", headers={"origin": "http://evil.test"})

    assert "access-control-allow-origin" not in resp.headers
