from sqlalchemy import func, insert, select
from retail.core.database import StoreGateway
from retail.models.order import Order
from retail.models.store import Store
from retail.models.user import User

ORDER_COLUMNS = (
    Order.order_number,
    Order.customer_id,
    Order.store_id,
    Order.product_name,
    Order.units_ordered,
    Order.order_time,
)


class OrderRepository:
    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    async def create(
        self, customer_id: int, store_id: int, product_name: str, units: int
    ) -> int:
        return await self.gateway.execute_insert(
            insert(Order).values(
                {
                    Order.customer_id: customer_id,
                    Order.store_id: store_id,
                    Order.product_name: product_name,
                    Order.units_ordered: units,
                }
            )
        )

    async def print_recent_for_customer(self, customer_id: int, limit: int = 5) -> int:
        query = (
            select(*ORDER_COLUMNS)
            .where(Order.customer_id == customer_id)
            .order_by(Order.order_number.desc())
            .limit(limit)
        )
        return await self.gateway.execute_query_print(query)

    async def print_for_manager(self, manager_id: int) -> int:
        """Все заказы магазинов менеджера, от старых к новым, без ограничения."""
        query = (
            select(*ORDER_COLUMNS, Store.name.label("store_name"))
            .select_from(Order)
            .join(Store, Store.id == Order.store_id)
            .where(Store.manager_id == manager_id)
            .order_by(Order.order_number)
        )
        return await self.gateway.execute_query_print(query)

    async def print_all(self) -> int:
        return await self.gateway.execute_query_print(
            select(*ORDER_COLUMNS).order_by(Order.order_number)
        )

    async def print_popular_products(self, manager_id: int, limit: int = 5) -> int:
        total = func.sum(Order.units_ordered)
        query = (
            select(Order.product_name, total.label("numberOfOrders"))
            .select_from(Order)
            .join(Store, Store.id == Order.store_id)
            .where(Store.manager_id == manager_id)
            .group_by(Order.product_name)
            .order_by(total.desc())
            .limit(limit)
        )
        return await self.gateway.execute_query_print(query)

    async def print_popular_customers(self, manager_id: int, limit: int = 5) -> int:
        orders_count = func.count(Order.order_number)
        query = (
            select(User.name, Order.customer_id, orders_count.label("numberOfOrders"))
            .select_from(Order)
            .join(Store, Store.id == Order.store_id)
            .join(User, User.id == Order.customer_id)
            .where(Store.manager_id == manager_id)
            .group_by(User.name, Order.customer_id)
            .order_by(orders_count.desc())
            .limit(limit)
        )
        return await self.gateway.execute_query_print(query)
