from retail.core.database import StoreGateway
from retail.core.session import Session
from retail.handlers.customer_handler import print_stores
from retail.services.order_service import OrderService
from retail.services.product_service import ProductService
from retail.services.store_service import StoreService
from retail.services.user_service import UserService
from retail.utils.console import Console
from retail.utils.validators import parse_float, parse_int, require_text
import logging

logger = logging.getLogger(__name__)


async def cmd_view_all_stores(console: Console, session: Session, gateway: StoreGateway):
    stores = await StoreService(gateway).list_stores()
    console.echo("All stores: ")
    print_stores(console, stores)


async def cmd_view_all_customers(
    console: Console, session: Session, gateway: StoreGateway
):
    await UserService(gateway).print_customers()


async def cmd_view_all_orders(console: Console, session: Session, gateway: StoreGateway):
    # Несмотря на название пункта меню, выводятся все заказы без ограничения
    await OrderService(gateway).print_all_orders()


async def cmd_update_product(console: Console, session: Session, gateway: StoreGateway):
    """Изменение названия, остатка и цены любого товара в любом магазине"""
    store_id = parse_int(console.prompt("\tEnter store ID: "), "store ID")
    old_name = require_text(console.prompt("\tEnter product: "), "Product name")
    new_name = require_text(
        console.prompt("\tEnter new product name: "), "New product name"
    )
    units = parse_int(
        console.prompt("\tEnter new number of units: "), "number of units"
    )
    price = parse_float(console.prompt("\tEnter new price per unit: "), "price per unit")

    await ProductService(gateway).update_as_admin(
        session.user_id, store_id, old_name, new_name, units, price
    )
    console.echo("Item updated.")


async def cmd_update_user(console: Console, session: Session, gateway: StoreGateway):
    """Перезапись всех полей пользователя"""
    user_id = parse_int(console.prompt("\tEnter user ID: "), "user ID")
    name = console.prompt("\tEnter new name: ")
    password = console.prompt("\tEnter new password: ")
    latitude = parse_float(console.prompt("\tEnter new latitude: "), "latitude")
    longitude = parse_float(console.prompt("\tEnter new longitude: "), "longitude")
    user_type = console.prompt("\tEnter new user type: ")

    await UserService(gateway).update_user(
        user_id, name, password, latitude, longitude, user_type
    )
    console.echo("User updated.")


async def cmd_delete_user(console: Console, session: Session, gateway: StoreGateway):
    # Связанные записи не удаляются: ограничения целостности остаются за БД
    user_id = parse_int(console.prompt("\tEnter user ID: "), "user ID")
    await UserService(gateway).delete_user(user_id)
    logger.info("Администратор %s удалил пользователя %s", session.user_id, user_id)
    console.echo("User deleted.")


async def cmd_view_all_updates(console: Console, session: Session, gateway: StoreGateway):
    await ProductService(gateway).print_all_updates()


async def cmd_view_all_requests(
    console: Console, session: Session, gateway: StoreGateway
):
    await ProductService(gateway).print_all_supply_requests()
