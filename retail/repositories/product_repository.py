from sqlalchemy import select, update
from retail.core.database import StoreGateway
from retail.models.product import Product
from retail.repositories.store_repository import managed_store_ids


class ProductRepository:
    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    async def print_by_store(self, store_id: int) -> int:
        query = select(
            Product.product_name, Product.number_of_units, Product.price_per_unit
        ).where(Product.store_id == store_id)
        return await self.gateway.execute_query_print(query)

    async def change_units(self, store_id: int, product_name: str, delta: int) -> int:
        """Изменить остаток на delta единиц. Нижняя граница не проверяется."""
        return await self.gateway.execute_update(
            update(Product)
            .where(Product.store_id == store_id, Product.product_name == product_name)
            .values({Product.number_of_units: Product.number_of_units + delta})
        )

    async def update_managed(
        self,
        manager_id: int,
        store_id: int,
        product_name: str,
        units: int,
        price: float,
    ) -> int:
        return await self.gateway.execute_update(
            update(Product)
            .where(
                Product.store_id == store_id,
                Product.product_name == product_name,
                Product.store_id.in_(managed_store_ids(manager_id)),
            )
            .values({Product.number_of_units: units, Product.price_per_unit: price})
        )

    async def update_any(
        self,
        store_id: int,
        old_name: str,
        new_name: str,
        units: int,
        price: float,
    ) -> int:
        return await self.gateway.execute_update(
            update(Product)
            .where(Product.store_id == store_id, Product.product_name == old_name)
            .values(
                {
                    Product.product_name: new_name,
                    Product.number_of_units: units,
                    Product.price_per_unit: price,
                }
            )
        )
