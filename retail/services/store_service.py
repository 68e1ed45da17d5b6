import math
from typing import List, NamedTuple
from retail.core.database import StoreGateway
from retail.repositories.store_repository import StoreRepository

NEARBY_RADIUS = 30


class StoreInfo(NamedTuple):
    id: str
    name: str
    latitude: str
    longitude: str


def calculate_distance(lat1: float, long1: float, lat2: float, long2: float) -> float:
    """Евклидово расстояние между двумя парами координат (без геодезии)."""
    return math.sqrt((lat1 - lat2) ** 2 + (long1 - long2) ** 2)


class StoreService:
    def __init__(self, gateway: StoreGateway):
        self.repo = StoreRepository(gateway)

    async def list_stores(self) -> List[StoreInfo]:
        rows = await self.repo.get_all()
        return [StoreInfo(*row) for row in rows]

    async def nearby_stores(
        self, latitude: float, longitude: float, radius: float = NEARBY_RADIUS
    ) -> List[StoreInfo]:
        """Магазины на расстоянии не более radius (граница включительно)."""
        return [
            store
            for store in await self.list_stores()
            if calculate_distance(
                latitude, longitude, float(store.latitude), float(store.longitude)
            )
            <= radius
        ]

    async def managed_stores(self, manager_id: int) -> List[StoreInfo]:
        rows = await self.repo.get_by_manager(manager_id)
        return [StoreInfo(*row) for row in rows]
