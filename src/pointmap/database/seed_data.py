"""
Reusable seed data functions for database initialization.

Seeds a small set of sample maps and points so a fresh development
database has something to query.
"""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Maps
from ..logging import get_logger
from ..store import repository

logger = get_logger(__name__)

SAMPLE_CREATOR = "pointmap-seed"

SAMPLE_MAPS: list[dict] = [
    {
        "map_name": "Old Town Walk",
        "description": "Landmarks along the historic center loop",
        "points": [
            {"name": "Clock Tower", "x": 120, "y": 80, "category": "MONUMENT"},
            {"name": "Market Square", "x": 160, "y": 140, "category": "PUBLICSPACE"},
            {"name": "Harbor Mural", "x": 40, "y": 210, "category": "ART"},
            {
                "name": "Night Ferry",
                "x": 15,
                "y": 260,
                "category": "OTHER",
                "other_text": "Transit stop",
            },
        ],
    },
    {
        "map_name": "Campus",
        "description": "Buildings around the university quad",
        "points": [
            {"name": "Library", "x": 300, "y": 300, "category": "SCHOOL"},
            {"name": "Cafe Bloom", "x": 320, "y": 280, "category": "BUSINESS"},
            {"name": "Lab Annex", "x": 350, "y": 330, "category": "WORKPLACE"},
            {"name": "North Hall", "x": 280, "y": 350, "category": "RESIDENCE"},
        ],
    },
]


async def seed_sample_maps(db: AsyncSession, *, force: bool = False) -> list[UUID]:
    """
    Insert the sample maps and their points.

    Skips maps whose name already exists for the seed creator unless `force`
    is set. Returns the IDs of the maps that were created.
    """
    created: list[UUID] = []

    for sample in SAMPLE_MAPS:
        if not force:
            stmt = select(Maps.id).where(
                Maps.map_name == sample["map_name"], Maps.creator_name == SAMPLE_CREATOR
            )
            existing = (await db.execute(stmt.limit(1))).scalar_one_or_none()
            if existing is not None:
                logger.info("Sample map already exists", map_id=str(existing))
                continue

        map_row = await repository.create_map(
            db,
            map_name=sample["map_name"],
            description=sample["description"],
            creator_name=SAMPLE_CREATOR,
        )
        for point in sample["points"]:
            await repository.create_point(
                db,
                map_id=map_row.id,
                name=point["name"],
                x=point["x"],
                y=point["y"],
                category=point.get("category"),
                other_text=point.get("other_text"),
                creator_name=SAMPLE_CREATOR,
            )

        logger.info(
            "Sample map created",
            map_id=str(map_row.id),
            map_name=map_row.map_name,
            point_count=len(sample["points"]),
        )
        created.append(map_row.id)

    return created
