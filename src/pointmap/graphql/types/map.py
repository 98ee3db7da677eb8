"""
Map GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .point import Point


@strawberry.type(description="A map")
class Map:
    """A named collection of points plus metadata."""

    id: strawberry.ID = strawberry.field(description="The ID of this map")
    created_at: datetime = strawberry.field(description="The date on which this map was created")
    map_name: str | None = strawberry.field(description="The name of this map")
    description: str | None = strawberry.field(description="The description for this map")
    creator_name: str | None = strawberry.field(description="The creator of this map")

    @strawberry.field(description="The points on this map, oldest first")
    async def points(
        self,
        info: strawberry.Info,
        size: Annotated[
            int | None,
            strawberry.argument(description="The number of points to return (default 10)"),
        ] = 10,
        page: Annotated[
            int | None,
            strawberry.argument(description="The index of the page to return (default 0)"),
        ] = 0,
    ) -> list[Annotated["Point", strawberry.lazy(".point")]]:
        from ..resolvers.map import resolve_map_points

        return await resolve_map_points(self, info, size, page)

    @strawberry.field(description="The number of points on this map")
    async def point_count(self, info: strawberry.Info) -> int:
        from ..resolvers.map import resolve_map_point_count

        return await resolve_map_point_count(self, info)
