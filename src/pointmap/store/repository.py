"""Repository helpers for map and point records."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Maps, Points


def parse_id(value: Any) -> UUID | None:
    """Parse a client-supplied ID, returning None when it is not a UUID."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        return None


async def get_map(session: AsyncSession, map_id: str | UUID) -> Maps | None:
    key = parse_id(map_id)
    if key is None:
        return None
    return await session.get(Maps, key)


async def get_point(session: AsyncSession, point_id: str | UUID) -> Points | None:
    key = parse_id(point_id)
    if key is None:
        return None
    return await session.get(Points, key)


async def get_maps(session: AsyncSession, map_ids: list[UUID]) -> list[Maps]:
    stmt = select(Maps).where(Maps.id.in_(map_ids))
    res = await session.execute(stmt)
    return list(res.scalars().all())


async def count_points(session: AsyncSession, map_id: UUID) -> int:
    stmt = select(func.count()).select_from(Points).where(Points.map_id == map_id)
    res = await session.execute(stmt)
    return res.scalar_one()


async def create_map(
    session: AsyncSession,
    *,
    map_name: str | None = None,
    description: str | None = None,
    creator_name: str | None = None,
) -> Maps:
    row = Maps(map_name=map_name, description=description, creator_name=creator_name)
    session.add(row)
    await session.flush()
    return row


async def create_point(
    session: AsyncSession,
    *,
    map_id: UUID,
    name: str,
    x: int,
    y: int,
    description: str | None = None,
    category: str | None = None,
    other_text: str | None = None,
    creator_name: str | None = None,
) -> Points:
    row = Points(
        map_id=map_id,
        name=name,
        x=x,
        y=y,
        description=description,
        category=category,
        other_text=other_text,
        creator_name=creator_name,
    )
    session.add(row)
    await session.flush()
    return row
