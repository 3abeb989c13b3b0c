"""Health probes: liveness always 200, readiness follows store connectivity."""

from httpx import ASGITransport, AsyncClient

from book_catalog.main import app


async def test_liveness(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_store(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"store": "healthy"}}


async def test_readiness_without_store_returns_503():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "store_unavailable"


async def test_readiness_when_ping_fails(client, store, monkeypatch):
    async def _down():
        return False

    monkeypatch.setattr(store, "ping", _down)
    res = await client.get("/health/ready")
    assert res.status_code == 503
