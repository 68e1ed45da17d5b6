from typing import List
from retail.core.database import StoreGateway
from retail.core.session import Session
from retail.services.order_service import OrderService
from retail.services.product_service import ProductService
from retail.services.store_service import NEARBY_RADIUS, StoreInfo, StoreService
from retail.utils.console import Console
from retail.utils.validators import parse_int, require_text


def print_stores(console: Console, stores: List[StoreInfo]) -> None:
    for index, store in enumerate(stores, start=1):
        console.echo(f"{index}. ")
        console.echo(f"    Store Name: {store.name.strip()}")
        console.echo(f"    Store ID: {store.id}")
        console.echo(f"    Store latitude: {store.latitude}")
        console.echo(f"    Store longitude: {store.longitude}")


async def cmd_view_stores(console: Console, session: Session, gateway: StoreGateway):
    """Магазины в радиусе 30 миль от пользователя"""
    stores = await StoreService(gateway).nearby_stores(
        session.latitude, session.longitude
    )
    console.echo(f"Available stores within {NEARBY_RADIUS} miles of your location: ")
    if not stores:
        console.echo(
            f"There are no stores within a {NEARBY_RADIUS} mile radius of your location."
        )
        return
    print_stores(console, stores)


async def cmd_view_products(console: Console, session: Session, gateway: StoreGateway):
    store_id = parse_int(console.prompt("\tEnter store ID: "), "store ID")
    console.echo(f"Available products in {store_id}: ")
    await ProductService(gateway).print_products(store_id)


async def cmd_place_order(console: Console, session: Session, gateway: StoreGateway):
    store_id = parse_int(console.prompt("\tEnter store ID: "), "store ID")
    product_name = require_text(console.prompt("\tEnter product name: "), "Product name")
    units = parse_int(console.prompt("\tEnter number of units: "), "number of units")

    order_number = await OrderService(gateway).place_order(
        session.user_id, store_id, product_name, units
    )
    console.echo(f"Order placed. Order number: {order_number}")


async def cmd_view_recent_orders(
    console: Console, session: Session, gateway: StoreGateway
):
    """Покупатель видит 5 своих последних заказов, менеджер - все заказы своих магазинов"""
    await OrderService(gateway).print_recent_orders(session.bundle)
