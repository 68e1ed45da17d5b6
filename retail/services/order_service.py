from retail.core.database import StoreGateway
from retail.core.session import Role, SessionBundle
from retail.repositories.order_repository import OrderRepository
from retail.repositories.product_repository import ProductRepository
import logging

logger = logging.getLogger(__name__)

RECENT_ORDERS_LIMIT = 5


class OrderService:
    def __init__(self, gateway: StoreGateway):
        self.repo = OrderRepository(gateway)
        self.product_repo = ProductRepository(gateway)

    async def place_order(
        self, customer_id: int, store_id: int, product_name: str, units: int
    ) -> int:
        """
        Оформить заказ: списать units с остатка и добавить строку заказа.

        Два независимых запроса без общей транзакции: если вставка заказа
        упадет, списание не откатывается. Остаток может стать отрицательным.

        Returns:
            int: Номер нового заказа
        """
        await self.product_repo.change_units(store_id, product_name, -units)
        order_number = await self.repo.create(customer_id, store_id, product_name, units)
        logger.info(
            "Заказ %s: пользователь %s, магазин %s, %s x%s",
            order_number,
            customer_id,
            store_id,
            product_name,
            units,
        )
        return order_number

    async def print_recent_orders(self, bundle: SessionBundle) -> int:
        # Для менеджера и администратора лимит не применяется
        if bundle.role is Role.CUSTOMER:
            return await self.repo.print_recent_for_customer(
                bundle.user_id, RECENT_ORDERS_LIMIT
            )
        return await self.repo.print_for_manager(bundle.user_id)

    async def print_all_orders(self) -> int:
        return await self.repo.print_all()

    async def print_popular_products(self, manager_id: int) -> int:
        return await self.repo.print_popular_products(manager_id)

    async def print_popular_customers(self, manager_id: int) -> int:
        return await self.repo.print_popular_customers(manager_id)
