from retail.core.database import StoreGateway
from retail.repositories.product_repository import ProductRepository
from retail.repositories.product_update_repository import ProductUpdateRepository
from retail.repositories.supply_request_repository import SupplyRequestRepository
import logging

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, gateway: StoreGateway):
        self.repo = ProductRepository(gateway)
        self.updates_repo = ProductUpdateRepository(gateway)
        self.requests_repo = SupplyRequestRepository(gateway)

    async def print_products(self, store_id: int) -> int:
        return await self.repo.print_by_store(store_id)

    async def update_as_manager(
        self,
        manager_id: int,
        store_id: int,
        product_name: str,
        units: int,
        price: float,
    ) -> int:
        """
        Обновить остаток и цену товара в магазине менеджера.

        Запись в журнал изменений добавляется всегда, даже если менеджер
        не управляет магазином и ни одна строка не обновилась.

        Returns:
            int: Количество обновленных строк товара
        """
        updated = await self.repo.update_managed(
            manager_id, store_id, product_name, units, price
        )
        if not updated:
            logger.warning(
                "Менеджер %s: товар %s в магазине %s не обновлен",
                manager_id,
                product_name,
                store_id,
            )
        await self.updates_repo.create(manager_id, store_id, product_name)
        return updated

    async def update_as_admin(
        self,
        admin_id: int,
        store_id: int,
        old_name: str,
        new_name: str,
        units: int,
        price: float,
    ) -> int:
        # Журнал пишется до изменения и по старому названию
        await self.updates_repo.create(admin_id, store_id, old_name)
        updated = await self.repo.update_any(store_id, old_name, new_name, units, price)
        logger.info(
            "Администратор %s обновил товар %s в магазине %s, строк: %s",
            admin_id,
            old_name,
            store_id,
            updated,
        )
        return updated

    async def request_supply(
        self,
        manager_id: int,
        store_id: int,
        product_name: str,
        units: int,
        warehouse_id: int,
    ) -> int:
        """Создать заявку на поставку и сразу увеличить остаток товара."""
        request_number = await self.requests_repo.create(
            manager_id, warehouse_id, store_id, product_name, units
        )
        await self.repo.change_units(store_id, product_name, units)
        logger.info(
            "Заявка на поставку %s: %s x%s в магазин %s со склада %s",
            request_number,
            product_name,
            units,
            store_id,
            warehouse_id,
        )
        return request_number

    async def print_recent_updates(self, manager_id: int) -> int:
        return await self.updates_repo.print_recent_for_manager(manager_id)

    async def print_all_updates(self) -> int:
        return await self.updates_repo.print_all()

    async def print_all_supply_requests(self) -> int:
        return await self.requests_repo.print_all()
