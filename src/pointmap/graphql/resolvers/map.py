from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from sqlalchemy import select

from ...database.connection import get_async_session
from ...dbmodels import Maps, Points
from ...logging import get_logger
from ...store import repository
from ..filters import apply_list_query, map_list_clauses

if TYPE_CHECKING:
    from ..filters import MapListQuery
    from ..mutations.root import PointAdd
    from ..types.map import Map
    from ..types.point import Point

logger = get_logger(__name__)


def to_map_type(row: Maps) -> Map:
    """Convert a Maps row to the GraphQL Map type."""
    from ..types.map import Map as MapType

    return MapType(
        id=strawberry.ID(str(row.id)),
        created_at=row.created_at,
        map_name=row.map_name,
        description=row.description,
        creator_name=row.creator_name,
    )


# Query resolvers
async def resolve_map_by_id(info: strawberry.Info, id: strawberry.ID) -> Map | None:
    """Resolve a map by its ID. Unknown or malformed IDs resolve to None."""
    async with get_async_session() as session:
        row = await repository.get_map(session, id)

        if row is None:
            logger.info("Map not found", map_id=str(id))
            return None

        return to_map_type(row)


async def resolve_map_list(
    info: strawberry.Info,
    query: MapListQuery | None,
    size: int | None,
    page: int | None,
) -> list[Map]:
    """
    Resolve a page of maps matching an optional filter.

    With `query.random` set, returns a random sample of up to `size` maps
    and ignores every other filter field and the page.
    """
    random = bool(query and query.random)
    clauses = map_list_clauses(query) if query and not random else []
    operation = query.operation if query else None

    stmt = apply_list_query(select(Maps), Maps, clauses, operation, size, page, random)

    async with get_async_session() as session:
        result = await session.execute(stmt)
        rows = result.scalars().all()

    logger.debug("Map list resolved", count=len(rows), random=random, page=page)
    return [to_map_type(row) for row in rows]


async def resolve_map_points(
    map: Map, info: strawberry.Info, size: int | None, page: int | None
) -> list[Point]:
    """Resolve a page of the points belonging to a map."""
    from .point import to_point_type

    map_id = repository.parse_id(map.id)
    stmt = apply_list_query(
        select(Points), Points, [Points.map_id == map_id], None, size, page
    )

    async with get_async_session() as session:
        result = await session.execute(stmt)
        return [to_point_type(row) for row in result.scalars().all()]


async def resolve_map_point_count(map: Map, info: strawberry.Info) -> int:
    """Count all points belonging to a map."""
    map_id = repository.parse_id(map.id)
    if map_id is None:
        return 0

    async with get_async_session() as session:
        return await repository.count_points(session, map_id)


# Mutation resolvers
async def add_map(
    info: strawberry.Info,
    map_name: str | None,
    description: str | None,
    creator_name: str | None,
) -> strawberry.ID:
    """Create a map and return its ID. createdAt is set by the server."""
    async with get_async_session() as session:
        row = await repository.create_map(
            session,
            map_name=map_name,
            description=description,
            creator_name=creator_name,
        )
        map_id = row.id

    logger.info("Map created", map_id=str(map_id), map_name=map_name)
    return strawberry.ID(str(map_id))


async def save_map(
    info: strawberry.Info,
    map_name: str | None,
    description: str | None,
    creator_name: str | None,
    points: list[PointAdd] | None,
) -> strawberry.ID:
    """
    Create a map together with its points and return the map ID.

    Every point is validated before anything is written, and the map and
    all points are inserted in one transaction: either all are stored or
    none are.
    """
    from .point import validate_point_fields

    validated = [
        (
            point,
            validate_point_fields(point.coordinates, point.category, point.other_text),
        )
        for point in points or []
    ]

    async with get_async_session() as session:
        row = await repository.create_map(
            session,
            map_name=map_name,
            description=description,
            creator_name=creator_name,
        )
        map_id = row.id

        for point, ((x, y), category, other_text) in validated:
            await repository.create_point(
                session,
                map_id=map_id,
                name=point.name,
                x=x,
                y=y,
                description=point.description,
                category=category,
                other_text=other_text,
                creator_name=point.creator_name,
            )

    logger.info("Map saved", map_id=str(map_id), map_name=map_name, point_count=len(validated))
    return strawberry.ID(str(map_id))
