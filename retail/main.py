import asyncio
import logging
import sys
from typing import Optional

import click

from retail.core.config import DB_PASSWORD, LOG_FILE, LOG_LEVEL
from retail.core.database import StoreConnectionError, StoreGateway, build_database_url
from retail.dispatcher import MenuDispatcher
from retail.utils.console import Console
from retail.utils.menu import GREETING_TEXT

logger = logging.getLogger(__name__)


async def run_app(gateway: StoreGateway, console: Console) -> int:
    """
    Подключается к БД, запускает меню и гарантированно закрывает соединение.

    Returns:
        int: Код завершения процесса
    """
    console.echo(GREETING_TEXT)
    console.echo("Connecting to database...", nl=False)
    try:
        await gateway.connect()
    except StoreConnectionError as e:
        console.error(f"Error - Unable to Connect to Database: {e}")
        console.echo("Make sure you started postgres on this machine")
        return 1
    console.echo("Done")

    try:
        await MenuDispatcher(gateway, console).run()
    finally:
        console.echo("Disconnecting from database...", nl=False)
        await gateway.close()
        console.echo("Done\n\nBye !")
    return 0


@click.command()
@click.argument("dbname")
@click.argument("port", type=int)
@click.argument("user")
@click.argument("password", required=False)
def cli(dbname: str, port: int, user: str, password: Optional[str]):
    """Консольный клиент базы данных розничной сети."""
    logging.basicConfig(
        level=LOG_LEVEL,
        filename=LOG_FILE,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = Console()
    url = build_database_url(
        dbname, port, user, password if password is not None else DB_PASSWORD
    )
    console.echo(f"Connection URL: {url.render_as_string(hide_password=True)}\n")
    gateway = StoreGateway(url, echo=console.echo)
    sys.exit(asyncio.run(run_app(gateway, console)))


if __name__ == "__main__":
    cli()
