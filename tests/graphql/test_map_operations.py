"""
Integration tests for map queries and mutations against a SQLite database
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest

ADD_MAP = """
mutation AddMap($mapName: String, $description: String, $creatorName: String) {
  addMap(mapName: $mapName, description: $description, creatorName: $creatorName)
}
"""

GET_MAP = """
query GetMap($id: ID!) {
  map(id: $id) {
    id
    createdAt
    mapName
    description
    creatorName
    pointCount
  }
}
"""

MAP_LIST = """
query MapList($query: MapListQuery, $size: Int, $page: Int) {
  mapList(query: $query, size: $size, page: $page) {
    id
    mapName
    creatorName
  }
}
"""


async def add_map(gql, **variables) -> str:
    result = await gql(ADD_MAP, variables)
    assert result.errors is None
    return result.data["addMap"]


@pytest.mark.integration
@pytest.mark.requires_db
class TestAddMap:
    @pytest.mark.asyncio
    async def test_returns_id(self, gql):
        map_id = await add_map(gql, mapName="Downtown")

        assert isinstance(map_id, str)
        assert map_id

    @pytest.mark.asyncio
    async def test_fetched_map_echoes_input(self, gql):
        map_id = await add_map(
            gql, mapName="Downtown", description="Shops and parks", creatorName="ada"
        )

        result = await gql(GET_MAP, {"id": map_id})

        assert result.errors is None
        fetched = result.data["map"]
        assert fetched["id"] == map_id
        assert fetched["mapName"] == "Downtown"
        assert fetched["description"] == "Shops and parks"
        assert fetched["creatorName"] == "ada"
        assert fetched["createdAt"] is not None
        assert fetched["pointCount"] == 0

    @pytest.mark.asyncio
    async def test_omitted_fields_are_null(self, gql):
        map_id = await add_map(gql)

        result = await gql(GET_MAP, {"id": map_id})

        fetched = result.data["map"]
        assert fetched["mapName"] is None
        assert fetched["description"] is None
        assert fetched["creatorName"] is None
        assert fetched["createdAt"] is not None


@pytest.mark.integration
@pytest.mark.requires_db
class TestMapLookup:
    @pytest.mark.asyncio
    async def test_nonexistent_id_returns_null(self, gql):
        result = await gql(GET_MAP, {"id": "nonexistent"})

        assert result.errors is None
        assert result.data["map"] is None

    @pytest.mark.asyncio
    async def test_unknown_uuid_returns_null(self, gql):
        await add_map(gql, mapName="Somewhere")

        result = await gql(GET_MAP, {"id": "00000000-0000-0000-0000-000000000000"})

        assert result.errors is None
        assert result.data["map"] is None


@pytest.mark.integration
@pytest.mark.requires_db
class TestMapList:
    @pytest.mark.asyncio
    async def test_default_page_holds_at_most_ten(self, gql):
        for i in range(12):
            await add_map(gql, mapName=f"Map {i}")

        result = await gql("{ mapList { id } }")

        assert result.errors is None
        assert len(result.data["mapList"]) == 10

    @pytest.mark.asyncio
    async def test_pages_follow_creation_order(self, gql):
        ids = [await add_map(gql, mapName=f"Map {i}") for i in range(5)]

        first = await gql(MAP_LIST, {"size": 2, "page": 0})
        second = await gql(MAP_LIST, {"size": 2, "page": 1})
        last = await gql(MAP_LIST, {"size": 2, "page": 2})
        beyond = await gql(MAP_LIST, {"size": 2, "page": 3})

        assert [m["id"] for m in first.data["mapList"]] == ids[0:2]
        assert [m["id"] for m in second.data["mapList"]] == ids[2:4]
        assert [m["id"] for m in last.data["mapList"]] == ids[4:5]
        assert beyond.data["mapList"] == []

    @pytest.mark.asyncio
    async def test_size_zero_returns_empty_list(self, gql):
        await add_map(gql, mapName="Only")

        result = await gql(MAP_LIST, {"size": 0})

        assert result.errors is None
        assert result.data["mapList"] == []

    @pytest.mark.asyncio
    async def test_negative_page_is_rejected(self, gql):
        result = await gql(MAP_LIST, {"page": -1})

        assert result.errors is not None
        assert "page must not be negative" in result.errors[0].message

    @pytest.mark.asyncio
    async def test_filters_combine_with_and_by_default(self, gql):
        await add_map(gql, mapName="Park", creatorName="ada")
        await add_map(gql, mapName="Park", creatorName="bob")
        await add_map(gql, mapName="Museum", creatorName="ada")

        result = await gql(MAP_LIST, {"query": {"mapName": "Park", "creatorName": "ada"}})

        assert result.errors is None
        maps = result.data["mapList"]
        assert [(m["mapName"], m["creatorName"]) for m in maps] == [("Park", "ada")]

    @pytest.mark.asyncio
    async def test_filters_combine_with_or(self, gql):
        await add_map(gql, mapName="Park", creatorName="ada")
        await add_map(gql, mapName="Park", creatorName="bob")
        await add_map(gql, mapName="Museum", creatorName="cyd")

        result = await gql(
            MAP_LIST,
            {"query": {"mapName": "Museum", "creatorName": "ada", "operation": "OR"}},
        )

        names = sorted((m["mapName"], m["creatorName"]) for m in result.data["mapList"])
        assert names == [("Museum", "cyd"), ("Park", "ada")]

    @pytest.mark.asyncio
    async def test_filters_combine_with_nor(self, gql):
        await add_map(gql, mapName="Park", creatorName="ada")
        await add_map(gql, mapName="Park", creatorName="bob")
        await add_map(gql, mapName="Museum")

        result = await gql(
            MAP_LIST,
            {"query": {"mapName": "Park", "creatorName": "ada", "operation": "NOR"}},
        )

        # A map without a creator is still selected by NOR
        assert [(m["mapName"], m["creatorName"]) for m in result.data["mapList"]] == [
            ("Museum", None)
        ]

    @pytest.mark.asyncio
    async def test_id_filter(self, gql):
        await add_map(gql, mapName="A")
        target = await add_map(gql, mapName="B")

        result = await gql(MAP_LIST, {"query": {"id": target}})

        assert [m["id"] for m in result.data["mapList"]] == [target]

    @pytest.mark.asyncio
    async def test_malformed_id_filter_matches_nothing(self, gql):
        await add_map(gql, mapName="A")

        result = await gql(MAP_LIST, {"query": {"id": "not-a-uuid"}})

        assert result.errors is None
        assert result.data["mapList"] == []

    @pytest.mark.asyncio
    async def test_date_range(self, gql):
        before = datetime.now(UTC) - timedelta(minutes=1)
        await add_map(gql, mapName="Recent")
        after = datetime.now(UTC) + timedelta(minutes=1)

        inside = await gql(
            MAP_LIST,
            {"query": {"startDate": before.isoformat(), "endDate": after.isoformat()}},
        )
        too_late = await gql(MAP_LIST, {"query": {"startDate": after.isoformat()}})

        assert inside.errors is None
        assert [m["mapName"] for m in inside.data["mapList"]] == ["Recent"]
        assert too_late.data["mapList"] == []

    @pytest.mark.asyncio
    async def test_date_bounds_respect_utc_offsets(self, gql):
        east = timezone(timedelta(hours=5))
        west = timezone(timedelta(hours=-3))
        before = datetime.now(UTC) - timedelta(minutes=1)
        map_id = await add_map(gql, mapName="Recent")
        after = datetime.now(UTC) + timedelta(minutes=1)

        from_east = await gql(
            MAP_LIST, {"query": {"startDate": before.astimezone(east).isoformat()}}
        )
        until_west = await gql(
            MAP_LIST, {"query": {"endDate": after.astimezone(west).isoformat()}}
        )
        fetched = await gql(GET_MAP, {"id": map_id})

        assert from_east.errors is None
        assert [m["mapName"] for m in from_east.data["mapList"]] == ["Recent"]
        assert [m["mapName"] for m in until_west.data["mapList"]] == ["Recent"]
        created_at = datetime.fromisoformat(fetched.data["map"]["createdAt"])
        assert created_at.utcoffset() == timedelta(0)

    @pytest.mark.asyncio
    async def test_random_ignores_filters_and_respects_size(self, gql):
        ids = {await add_map(gql, mapName=f"Map {i}") for i in range(6)}

        result = await gql(
            MAP_LIST,
            {"query": {"random": True, "mapName": "no such map"}, "size": 4, "page": 5},
        )

        assert result.errors is None
        sampled = [m["id"] for m in result.data["mapList"]]
        assert len(sampled) == 4
        assert len(set(sampled)) == 4
        assert set(sampled) <= ids
