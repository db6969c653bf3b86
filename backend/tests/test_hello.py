"""Smoke tests — verifies the app starts and the demo endpoint responds."""

import pytest
from httpx import AsyncClient, ASGITransport

from spa_server.assets import AssetTable
from spa_server.main import app, create_app


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def empty_client():
    transport = ASGITransport(app=create_app(AssetTable()))
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
async def test_hello(client):
    r = await client.get("/hello")
    assert r.status_code == 200
    assert r.headers["content-type"] == "application/json"
    assert r.content == b'{"message":"Hello, World!"}'


@pytest.mark.asyncio
async def test_hello_with_empty_bundle(empty_client):
    """A missing front-end build never takes the API down."""
    r = await empty_client.get("/hello")
    assert r.status_code == 200
    assert r.json() == {"message": "Hello, World!"}


@pytest.mark.asyncio
async def test_empty_bundle_everything_else_404(empty_client):
    for path in ("/", "/index.html", "/dashboard", "/assets/app.js", "/a/b/c"):
        r = await empty_client.get(path)
        assert r.status_code == 404, path
        assert r.text == "404"


@pytest.mark.asyncio
async def test_docs_routes_disabled(empty_client):
    # /docs has no dot, so with no bundle it is a plain 404 from the SPA handler
    r = await empty_client.get("/docs")
    assert r.status_code == 404
    assert r.text == "404"

    r = await empty_client.get("/openapi.json")
    assert r.status_code == 404
    assert r.text == "404"
