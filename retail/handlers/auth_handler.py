from retail.core.database import StoreGateway
from retail.core.session import Session
from retail.services.user_service import UserService
from retail.utils.console import Console
from retail.utils.validators import parse_float
import logging

logger = logging.getLogger(__name__)


async def cmd_create_user(console: Console, session: Session, gateway: StoreGateway):
    """Регистрация нового покупателя"""
    name = console.prompt("\tEnter name: ")
    password = console.prompt("\tEnter password: ")
    latitude = parse_float(console.prompt("\tEnter latitude: "), "latitude")
    longitude = parse_float(console.prompt("\tEnter longitude: "), "longitude")

    await UserService(gateway).create_user(name, password, latitude, longitude)
    console.echo("User successfully created!")


async def cmd_log_in(console: Console, session: Session, gateway: StoreGateway):
    """Вход по имени и паролю. При неудаче состояние сессии не меняется."""
    name = console.prompt("\tEnter name: ")
    password = console.prompt("\tEnter password: ")

    bundle = await UserService(gateway).log_in(name, password)
    if bundle is None:
        console.echo("Invalid credentials")
        return

    session.log_in(bundle)
    logger.info("Пользователь %s вошел как %s", bundle.user_id, bundle.role.value)
    console.echo(f"    User ID: {bundle.user_id}")
    console.echo(f"    User Name: {bundle.name}")
    console.echo(f"    User Latitude: {bundle.latitude}")
    console.echo(f"    User Longitude: {bundle.longitude}")
    console.echo(f"    User Type: {bundle.role.value}")
    console.echo(f"Welcome, {bundle.name}")
