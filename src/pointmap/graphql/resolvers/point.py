from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import strawberry
from sqlalchemy import select

from ...database.connection import get_async_session
from ...dbmodels import Points
from ...logging import get_logger
from ...store import repository
from ..filters import apply_list_query, parse_coordinates, point_list_clauses
from ..types.point import PointCategory

if TYPE_CHECKING:
    from ..filters import PointListQuery
    from ..types.map import Map
    from ..types.point import Point

logger = get_logger(__name__)


def validate_point_fields(
    coordinates: Sequence[int],
    category: PointCategory | None,
    other_text: str | None,
) -> tuple[tuple[int, int], str | None, str | None]:
    """
    Validate point input and return ((x, y), stored category, other text).

    OTHER requires a non-blank otherText; any other category (or none)
    must not carry one.
    """
    x, y = parse_coordinates(coordinates)

    if category == PointCategory.OTHER:
        if other_text is None or not other_text.strip():
            raise ValueError("otherText is required when category is OTHER")
    elif other_text is not None:
        raise ValueError("otherText is only allowed when category is OTHER")

    return (x, y), category.value if category else None, other_text


def to_point_type(row: Points) -> Point:
    """Convert a Points row to the GraphQL Point type."""
    from ..types.point import Coordinates
    from ..types.point import Point as PointType

    return PointType(
        id=strawberry.ID(str(row.id)),
        map_id=strawberry.ID(str(row.map_id)),
        name=row.name,
        coordinates=Coordinates(x=row.x, y=row.y),
        description=row.description,
        category=PointCategory(row.category) if row.category else None,
        other_text=row.other_text,
        creator_name=row.creator_name,
        created_at=row.created_at,
    )


# Query resolvers
async def resolve_point_by_id(info: strawberry.Info, id: strawberry.ID) -> Point | None:
    """Resolve a point by its ID. Unknown or malformed IDs resolve to None."""
    async with get_async_session() as session:
        row = await repository.get_point(session, id)

        if row is None:
            logger.info("Point not found", point_id=str(id))
            return None

        return to_point_type(row)


async def resolve_point_list(
    info: strawberry.Info,
    query: PointListQuery | None,
    size: int | None,
    page: int | None,
) -> list[Point]:
    """
    Resolve a page of points matching an optional filter.

    With `query.random` set, returns a random sample of up to `size` points
    and ignores every other filter field and the page.
    """
    random = bool(query and query.random)
    clauses = point_list_clauses(query) if query and not random else []
    operation = query.operation if query else None

    stmt = apply_list_query(select(Points), Points, clauses, operation, size, page, random)

    async with get_async_session() as session:
        result = await session.execute(stmt)
        rows = result.scalars().all()

    logger.debug("Point list resolved", count=len(rows), random=random, page=page)
    return [to_point_type(row) for row in rows]


async def resolve_point_map(point: Point, info: strawberry.Info) -> Map | None:
    """Resolve the map of a point through the request's map loader."""
    from .map import to_map_type

    map_id = repository.parse_id(point.map_id)
    if map_id is None:
        return None

    row = await info.context["loaders"].map_loader.load(map_id)
    return to_map_type(row) if row is not None else None


# Mutation resolvers
async def add_point(
    info: strawberry.Info,
    map_id: strawberry.ID,
    name: str,
    coordinates: list[int],
    description: str | None,
    category: PointCategory | None,
    other_text: str | None,
    creator_name: str | None,
) -> strawberry.ID:
    """Create a point on an existing map and return its ID."""
    (x, y), stored_category, other_text = validate_point_fields(
        coordinates, category, other_text
    )

    async with get_async_session() as session:
        map_row = await repository.get_map(session, map_id)
        if map_row is None:
            raise RuntimeError("Map not found")

        row = await repository.create_point(
            session,
            map_id=map_row.id,
            name=name,
            x=x,
            y=y,
            description=description,
            category=stored_category,
            other_text=other_text,
            creator_name=creator_name,
        )
        point_id = row.id

    logger.info("Point created", point_id=str(point_id), map_id=str(map_row.id), name=name)
    return strawberry.ID(str(point_id))
