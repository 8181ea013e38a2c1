"""App Wiring: health probe, error envelopes and per-app store isolation."""

from httpx import ASGITransport, AsyncClient

from exercise_tracker.main import create_app


async def test_health_check(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_each_app_owns_a_fresh_store(client, test_settings):
    await client.post("/api/users", json={"username": "alice"})

    other = create_app(test_settings)
    async with AsyncClient(
        transport=ASGITransport(app=other), base_url="http://test",
    ) as c:
        assert (await c.get("/api/users")).json() == []


async def test_unhandled_error_does_not_leak_details(store, test_settings):
    def explode():
        raise RuntimeError("secret internals")

    store.list_users = explode
    app = create_app(test_settings, store=store)
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/api/users")
    assert res.status_code == 500
    assert res.json() == {"error": "An unexpected error occurred"}
