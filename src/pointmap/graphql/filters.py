"""
Filter inputs and predicate composition for list queries
"""

from collections.abc import Sequence
from datetime import datetime
from enum import Enum

import strawberry
from sqlalchemy import (
    BigInteger,
    ColumnElement,
    Select,
    and_,
    cast,
    false,
    func,
    literal,
    not_,
    or_,
    true,
)

from ..config import settings
from ..dbmodels import Maps, Points, as_utc
from ..store.repository import parse_id
from .types.point import PointCategory


@strawberry.enum
class Operation(Enum):
    """Boolean combinator applied across the fields of a list query"""

    AND = "AND"
    OR = "OR"
    NOR = "NOR"


@strawberry.input
class MapListQuery:
    """Filter which can be applied to mapList."""

    id: strawberry.ID | None = strawberry.field(
        default=None, description="Selects the map with this ID"
    )
    map_name: str | None = strawberry.field(
        default=None, description="Selects all maps with this mapName"
    )
    creator_name: str | None = strawberry.field(
        default=None, description="Selects all maps with this creatorName"
    )
    start_date: datetime | None = strawberry.field(
        default=None, description="Selects all maps created after this date"
    )
    end_date: datetime | None = strawberry.field(
        default=None, description="Selects all maps created before this date"
    )
    operation: Operation | None = strawberry.field(
        default=None, description="Operation combining the given fields (default AND)"
    )
    random: bool | None = strawberry.field(
        default=None,
        description=(
            "When true, returns a random selection of maps. "
            "Overrides all other fields and the page argument."
        ),
    )


@strawberry.input
class PointListQuery:
    """Filter which can be applied to pointList."""

    id: strawberry.ID | None = strawberry.field(
        default=None, description="Selects the point with this ID"
    )
    map_id: strawberry.ID | None = strawberry.field(
        default=None, description="Selects all points with this mapId"
    )
    coordinates: list[int] | None = strawberry.field(
        default=None,
        description="Selects all points at [x, y], or within `within` of it",
    )
    within: int | None = strawberry.field(
        default=None,
        description="Euclidean radius in pixels around coordinates (inclusive)",
    )
    creator_name: str | None = strawberry.field(
        default=None, description="Selects all points with this creatorName"
    )
    category: PointCategory | None = strawberry.field(
        default=None, description="Selects all points with this category"
    )
    operation: Operation | None = strawberry.field(
        default=None, description="Operation combining the given fields (default AND)"
    )
    random: bool | None = strawberry.field(
        default=None,
        description=(
            "When true, returns a random selection of points. "
            "Overrides all other fields and the page argument."
        ),
    )


def parse_coordinates(coordinates: Sequence[int]) -> tuple[int, int]:
    """Validate an [x, y] coordinate list."""
    if len(coordinates) != 2:
        raise ValueError("coordinates must be a list of exactly two integers [x, y]")
    x, y = coordinates
    return int(x), int(y)


def combine_clauses(
    clauses: Sequence[ColumnElement[bool]], operation: Operation | None
) -> ColumnElement[bool]:
    """Combine filter clauses with AND, OR or NOR. No clauses means no filtering."""
    if not clauses:
        return true()

    if operation == Operation.OR:
        return or_(*clauses)
    if operation == Operation.NOR:
        return not_(or_(*clauses))
    return and_(*clauses)


def _id_clause(column, value: strawberry.ID) -> ColumnElement[bool]:
    key = parse_id(value)
    # Malformed IDs can never match a stored UUID
    if key is None:
        return false()
    return column == key


def map_list_clauses(query: MapListQuery) -> list[ColumnElement[bool]]:
    """Build one clause per supplied MapListQuery field."""
    clauses: list[ColumnElement[bool]] = []

    if query.id is not None:
        clauses.append(_id_clause(Maps.id, query.id))
    if query.map_name is not None:
        clauses.append(Maps.map_name.is_not_distinct_from(query.map_name))
    if query.creator_name is not None:
        clauses.append(Maps.creator_name.is_not_distinct_from(query.creator_name))
    if query.start_date is not None:
        clauses.append(Maps.created_at > as_utc(query.start_date))
    if query.end_date is not None:
        clauses.append(Maps.created_at < as_utc(query.end_date))

    return clauses


def point_list_clauses(query: PointListQuery) -> list[ColumnElement[bool]]:
    """Build one clause per supplied PointListQuery field.

    `coordinates` and `within` together form a single radius clause.
    """
    clauses: list[ColumnElement[bool]] = []

    if query.id is not None:
        clauses.append(_id_clause(Points.id, query.id))
    if query.map_id is not None:
        clauses.append(_id_clause(Points.map_id, query.map_id))

    if query.within is not None and query.coordinates is None:
        raise ValueError("within requires coordinates")
    if query.coordinates is not None:
        cx, cy = parse_coordinates(query.coordinates)
        if query.within is None:
            clauses.append(and_(Points.x == cx, Points.y == cy))
        else:
            if query.within < 0:
                raise ValueError("within must not be negative")
            # Squared distances overflow 32-bit integers
            dx = cast(Points.x, BigInteger) - cx
            dy = cast(Points.y, BigInteger) - cy
            radius_sq = literal(query.within * query.within, BigInteger)
            clauses.append(dx * dx + dy * dy <= radius_sq)

    if query.creator_name is not None:
        clauses.append(Points.creator_name.is_not_distinct_from(query.creator_name))
    if query.category is not None:
        clauses.append(Points.category.is_not_distinct_from(query.category.value))

    return clauses


def page_bounds(size: int | None, page: int | None) -> tuple[int, int]:
    """Turn size/page arguments into (limit, offset)."""
    if size is None:
        size = settings.default_page_size
    if page is None:
        page = 0
    if size < 0:
        raise ValueError("size must not be negative")
    if page < 0:
        raise ValueError("page must not be negative")

    limit = min(size, settings.max_page_size)
    return limit, page * limit


def apply_list_query(
    stmt: Select,
    model: type[Maps] | type[Points],
    clauses: Sequence[ColumnElement[bool]],
    operation: Operation | None,
    size: int | None,
    page: int | None,
    random: bool | None = False,
) -> Select:
    """Apply filtering, ordering and pagination to a select over maps or points.

    A random selection ignores clauses and page, sampling up to `size`
    distinct rows in no particular order.
    """
    if random:
        limit, _ = page_bounds(size, 0)
        return stmt.order_by(func.random()).limit(limit)

    limit, offset = page_bounds(size, page)
    return (
        stmt.where(combine_clauses(clauses, operation))
        .order_by(model.created_at.asc(), model.id.asc())
        .limit(limit)
        .offset(offset)
    )
