"""
Point GraphQL type definitions
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .map import Map


@strawberry.enum
class PointCategory(Enum):
    """Category of a point. OTHER carries a free-form description in otherText."""

    ART = "ART"
    MONUMENT = "MONUMENT"
    PUBLICSPACE = "PUBLICSPACE"
    RESIDENCE = "RESIDENCE"
    SCHOOL = "SCHOOL"
    BUSINESS = "BUSINESS"
    WORKPLACE = "WORKPLACE"
    OTHER = "OTHER"


@strawberry.type(description="The coordinates of a point on the map")
class Coordinates:
    """The coordinates of a point on the map."""

    x: int = strawberry.field(description="The x coordinate of the point")
    y: int = strawberry.field(description="The y coordinate of the point")


@strawberry.type(description="A point on a map")
class Point:
    """A point on a map."""

    id: strawberry.ID = strawberry.field(description="The ID of this point")
    map_id: strawberry.ID = strawberry.field(
        description="The ID of the map with which this point is associated"
    )
    name: str = strawberry.field(description="The name of this point")
    coordinates: Coordinates = strawberry.field(description="The coordinates of the point")
    description: str | None = strawberry.field(description="The description of this point")
    category: PointCategory | None = strawberry.field(description="The category of this point")
    other_text: str | None = strawberry.field(
        description="String used to describe a point's category if it is OTHER"
    )
    creator_name: str | None = strawberry.field(description="The creator of this point")
    created_at: datetime = strawberry.field(description="The date on which this point was created")

    @strawberry.field(description="The map this point belongs to")
    async def map(self, info: strawberry.Info) -> Annotated["Map", strawberry.lazy(".map")] | None:
        from ..resolvers.point import resolve_point_map

        return await resolve_point_map(self, info)
