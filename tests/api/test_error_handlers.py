"""Global error handlers: every failure answers {"message": str}."""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from book_catalog.api.error_handlers import register_error_handlers
from book_catalog.core.errors import StoreError, ValidationError


def _app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/validation")
    async def raise_validation():
        raise ValidationError("Book validation failed: title")

    @app.get("/store")
    async def raise_store():
        raise StoreError("Connection or operational error", "find")

    @app.get("/boom")
    async def raise_unexpected():
        raise RuntimeError("secret internals")

    return app


async def _get(path: str):
    transport = ASGITransport(app=_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(path)


async def test_validation_error_maps_to_400():
    res = await _get("/validation")
    assert res.status_code == 400
    assert res.json() == {"message": "Book validation failed: title"}


async def test_store_error_maps_to_500():
    res = await _get("/store")
    assert res.status_code == 500
    assert res.json() == {"message": "Connection or operational error"}


async def test_unexpected_error_does_not_leak_details():
    res = await _get("/boom")
    assert res.status_code == 500
    assert res.json() == {"message": "An unexpected error occurred"}
