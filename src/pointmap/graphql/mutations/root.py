"""
Root GraphQL mutation definitions
"""

from typing import Annotated

import strawberry

from ..types.point import PointCategory

COORDINATES_DOC = "The coordinates of this point as an array of two ints [x, y]"
OTHER_TEXT_DOC = "String used to describe the category if it is OTHER"


# Input types for mutations
@strawberry.input(description="Input for adding a point")
class PointAdd:
    name: str = strawberry.field(description="The name of this point")
    coordinates: list[int] = strawberry.field(description=COORDINATES_DOC)
    description: str | None = strawberry.field(
        default=None, description="The description of this point"
    )
    category: PointCategory | None = strawberry.field(
        default=None, description="The category of this point"
    )
    other_text: str | None = strawberry.field(default=None, description=OTHER_TEXT_DOC)
    creator_name: str | None = strawberry.field(
        default=None, description="The creator of this point"
    )


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addMap", description="Add a map. Returns the ID of the new map")
    async def add_map(
        self,
        info: strawberry.Info,
        map_name: Annotated[
            str | None, strawberry.argument(description="The name of this map")
        ] = None,
        description: Annotated[
            str | None, strawberry.argument(description="The description of this map")
        ] = None,
        creator_name: Annotated[
            str | None, strawberry.argument(description="The creator of this map")
        ] = None,
    ) -> strawberry.ID:
        from ..resolvers.map import add_map

        return await add_map(info, map_name, description, creator_name)

    @strawberry.mutation(
        name="addPoint", description="Add a point to a map. Returns the ID of the new point"
    )
    async def add_point(
        self,
        info: strawberry.Info,
        map_id: Annotated[
            strawberry.ID, strawberry.argument(description="The ID of the point's map")
        ],
        name: Annotated[str, strawberry.argument(description="The name of this point")],
        coordinates: Annotated[list[int], strawberry.argument(description=COORDINATES_DOC)],
        description: Annotated[
            str | None, strawberry.argument(description="The description of this point")
        ] = None,
        category: Annotated[
            PointCategory | None, strawberry.argument(description="The category of this point")
        ] = None,
        other_text: Annotated[
            str | None, strawberry.argument(description=OTHER_TEXT_DOC)
        ] = None,
        creator_name: Annotated[
            str | None, strawberry.argument(description="The creator of this point")
        ] = None,
    ) -> strawberry.ID:
        from ..resolvers.point import add_point

        return await add_point(
            info, map_id, name, coordinates, description, category, other_text, creator_name
        )

    @strawberry.mutation(
        name="saveMap",
        description="Save a map and its points in one transaction. Returns the map's ID",
    )
    async def save_map(
        self,
        info: strawberry.Info,
        map_name: Annotated[
            str | None, strawberry.argument(description="The name of this map")
        ] = None,
        description: Annotated[
            str | None, strawberry.argument(description="The description for this map")
        ] = None,
        creator_name: Annotated[
            str | None, strawberry.argument(description="The creator of this map")
        ] = None,
        points: Annotated[
            list[PointAdd] | None, strawberry.argument(description="A list of the points to add")
        ] = None,
    ) -> strawberry.ID:
        from ..resolvers.map import save_map

        return await save_map(info, map_name, description, creator_name, points)
