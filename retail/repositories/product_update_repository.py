from sqlalchemy import func, insert, select
from retail.core.database import StoreGateway
from retail.models.product_update import ProductUpdate
from retail.models.store import Store

UPDATE_COLUMNS = (
    ProductUpdate.update_number,
    ProductUpdate.manager_id,
    ProductUpdate.store_id,
    ProductUpdate.product_name,
    ProductUpdate.updated_on,
)


class ProductUpdateRepository:
    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    async def create(self, manager_id: int, store_id: int, product_name: str) -> int:
        return await self.gateway.execute_insert(
            insert(ProductUpdate).values(
                {
                    ProductUpdate.manager_id: manager_id,
                    ProductUpdate.store_id: store_id,
                    ProductUpdate.product_name: product_name,
                    ProductUpdate.updated_on: func.now(),
                }
            )
        )

    async def print_recent_for_manager(self, manager_id: int, limit: int = 5) -> int:
        query = (
            select(*UPDATE_COLUMNS)
            .select_from(ProductUpdate)
            .join(Store, Store.id == ProductUpdate.store_id)
            .where(Store.manager_id == manager_id)
            .order_by(ProductUpdate.updated_on.desc(), ProductUpdate.update_number.desc())
            .limit(limit)
        )
        return await self.gateway.execute_query_print(query)

    async def print_all(self) -> int:
        return await self.gateway.execute_query_print(
            select(*UPDATE_COLUMNS).order_by(
                ProductUpdate.updated_on, ProductUpdate.update_number
            )
        )
