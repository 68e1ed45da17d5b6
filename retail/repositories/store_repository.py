from typing import List, Optional
from sqlalchemy import select
from retail.core.database import StoreGateway
from retail.models.store import Store


def managed_store_ids(manager_id: int):
    """Подзапрос с id магазинов, которыми управляет менеджер."""
    return select(Store.id).where(Store.manager_id == manager_id)


class StoreRepository:
    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    async def get_all(self) -> List[List[Optional[str]]]:
        return await self.gateway.execute_query_rows(
            select(Store.id, Store.name, Store.latitude, Store.longitude).order_by(
                Store.id
            )
        )

    async def get_by_manager(self, manager_id: int) -> List[List[Optional[str]]]:
        return await self.gateway.execute_query_rows(
            select(Store.id, Store.name, Store.latitude, Store.longitude)
            .where(Store.manager_id == manager_id)
            .order_by(Store.id)
        )
