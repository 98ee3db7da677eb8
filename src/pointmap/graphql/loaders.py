from uuid import UUID

from strawberry.dataloader import DataLoader

from ..database.connection import get_async_session
from ..dbmodels import Maps
from ..store import repository


async def load_maps(keys: list[UUID]) -> list[Maps | None]:
    """Batch load maps by ID."""
    async with get_async_session() as session:
        maps = await repository.get_maps(session, keys)
        maps_map = {row.id: row for row in maps}
        return [maps_map.get(key) for key in keys]


class Loaders:
    def __init__(self):
        self.map_loader = DataLoader(load_fn=load_maps)
