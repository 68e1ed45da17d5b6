from sqlalchemy import insert, select
from retail.core.database import StoreGateway
from retail.models.supply_request import ProductSupplyRequest


class SupplyRequestRepository:
    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    async def create(
        self,
        manager_id: int,
        warehouse_id: int,
        store_id: int,
        product_name: str,
        units: int,
    ) -> int:
        return await self.gateway.execute_insert(
            insert(ProductSupplyRequest).values(
                {
                    ProductSupplyRequest.manager_id: manager_id,
                    ProductSupplyRequest.warehouse_id: warehouse_id,
                    ProductSupplyRequest.store_id: store_id,
                    ProductSupplyRequest.product_name: product_name,
                    ProductSupplyRequest.units_requested: units,
                }
            )
        )

    async def print_all(self) -> int:
        return await self.gateway.execute_query_print(
            select(ProductSupplyRequest.__table__).order_by(
                ProductSupplyRequest.request_number
            )
        )
