"""
Root GraphQL query definitions
"""

from typing import Annotated

import strawberry

from ..filters import MapListQuery, PointListQuery
from ..types.map import Map
from ..types.point import Point

QUERY_ARG = "Query object for more specific searches"
PAGE_ARG = "The index of the page to return (default 0)"


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Given a map's ID, returns that map")
    async def map(self, info: strawberry.Info, id: strawberry.ID) -> Map | None:
        from ..resolvers.map import resolve_map_by_id

        return await resolve_map_by_id(info, id)

    @strawberry.field(
        description="Get a page of maps of a given size, optionally matching a filter"
    )
    async def map_list(
        self,
        info: strawberry.Info,
        query: Annotated[MapListQuery | None, strawberry.argument(description=QUERY_ARG)] = None,
        size: Annotated[
            int | None, strawberry.argument(description="The number of maps to return (default 10)")
        ] = 10,
        page: Annotated[int | None, strawberry.argument(description=PAGE_ARG)] = 0,
    ) -> list[Map]:
        from ..resolvers.map import resolve_map_list

        return await resolve_map_list(info, query, size, page)

    @strawberry.field(description="Given a point's ID, returns that point")
    async def point(self, info: strawberry.Info, id: strawberry.ID) -> Point | None:
        from ..resolvers.point import resolve_point_by_id

        return await resolve_point_by_id(info, id)

    @strawberry.field(
        description="Get a page of points of a given size, optionally matching a filter"
    )
    async def point_list(
        self,
        info: strawberry.Info,
        query: Annotated[PointListQuery | None, strawberry.argument(description=QUERY_ARG)] = None,
        size: Annotated[
            int | None,
            strawberry.argument(description="The number of points to return (default 10)"),
        ] = 10,
        page: Annotated[int | None, strawberry.argument(description=PAGE_ARG)] = 0,
    ) -> list[Point]:
        from ..resolvers.point import resolve_point_list

        return await resolve_point_list(info, query, size, page)
