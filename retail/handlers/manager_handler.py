from retail.core.database import StoreGateway
from retail.core.session import Session
from retail.handlers.customer_handler import print_stores
from retail.services.order_service import OrderService
from retail.services.product_service import ProductService
from retail.services.store_service import StoreService
from retail.utils.console import Console
from retail.utils.validators import parse_float, parse_int, require_text


async def cmd_view_managed_stores(
    console: Console, session: Session, gateway: StoreGateway
):
    stores = await StoreService(gateway).managed_stores(session.user_id)
    console.echo("Managed stores: ")
    print_stores(console, stores)


async def cmd_update_product(console: Console, session: Session, gateway: StoreGateway):
    """Изменение остатка и цены товара в своем магазине"""
    store_id = parse_int(console.prompt("\tEnter store ID: "), "store ID")
    product_name = require_text(console.prompt("\tEnter product: "), "Product name")
    units = parse_int(
        console.prompt("\tEnter new number of units: "), "number of units"
    )
    price = parse_float(console.prompt("\tEnter new price per unit: "), "price per unit")

    await ProductService(gateway).update_as_manager(
        session.user_id, store_id, product_name, units, price
    )
    console.echo("Item updated.")


async def cmd_view_recent_updates(
    console: Console, session: Session, gateway: StoreGateway
):
    await ProductService(gateway).print_recent_updates(session.user_id)


async def cmd_view_popular_products(
    console: Console, session: Session, gateway: StoreGateway
):
    await OrderService(gateway).print_popular_products(session.user_id)


async def cmd_view_popular_customers(
    console: Console, session: Session, gateway: StoreGateway
):
    await OrderService(gateway).print_popular_customers(session.user_id)


async def cmd_place_supply_request(
    console: Console, session: Session, gateway: StoreGateway
):
    """Заявка на поставку со склада. Остаток увеличивается сразу."""
    store_id = parse_int(console.prompt("\tEnter store ID: "), "store ID")
    product_name = require_text(console.prompt("\tEnter product name: "), "Product name")
    units = parse_int(
        console.prompt("\tEnter new number of units: "), "number of units"
    )
    warehouse_id = parse_int(console.prompt("Enter warehouse ID: "), "warehouse ID")

    request_number = await ProductService(gateway).request_supply(
        session.user_id, store_id, product_name, units, warehouse_id
    )
    console.echo(f"Product supply request placed. Request number: {request_number}")
