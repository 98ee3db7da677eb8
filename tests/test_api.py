"""
Tests for the FastAPI application: health endpoint and GraphQL over HTTP
"""

import pytest
from httpx import ASGITransport, AsyncClient

from pointmap.api.app import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.mark.asyncio
async def test_health(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.headers["x-request-id"]


@pytest.mark.asyncio
async def test_request_id_header_is_echoed(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["x-request-id"] == "req-123"


@pytest.mark.integration
@pytest.mark.requires_db
@pytest.mark.asyncio
async def test_graphql_add_and_fetch_map(app, db_schema):
    _ = db_schema

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        created = await client.post(
            "/graphql",
            json={
                "query": "mutation AddMap($name: String) { addMap(mapName: $name) }",
                "variables": {"name": "Harbor"},
            },
        )
        assert created.status_code == 200
        map_id = created.json()["data"]["addMap"]

        fetched = await client.post(
            "/graphql",
            json={
                "query": "query GetMap($id: ID!) { map(id: $id) { id mapName } }",
                "variables": {"id": map_id},
            },
        )

    assert fetched.status_code == 200
    assert fetched.json()["data"]["map"] == {"id": map_id, "mapName": "Harbor"}


@pytest.mark.integration
@pytest.mark.requires_db
@pytest.mark.asyncio
async def test_graphql_missing_required_argument_is_rejected(app, db_schema):
    _ = db_schema

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/graphql",
            json={"query": 'mutation { addPoint(name: "x", coordinates: [1, 2]) }'},
        )

    body = response.json()
    assert body.get("data") is None
    assert "mapId" in body["errors"][0]["message"]


@pytest.mark.asyncio
async def test_malformed_request_id_header_is_replaced(app):
    inbound = "x" * 200
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health", headers={"X-Request-ID": inbound})

    echoed = response.headers["x-request-id"]
    assert echoed != inbound
    assert len(echoed) == 14
