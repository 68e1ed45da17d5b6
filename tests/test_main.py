import pytest
from click.testing import CliRunner
from unittest.mock import patch

from retail.core.database import StoreGateway
from retail.main import cli, run_app


def test_cli_wrong_argument_count_prints_usage():
    runner = CliRunner()

    with patch("retail.main.StoreGateway") as gateway_cls:
        result = runner.invoke(cli, ["retaildb", "5432"])

    assert result.exit_code == 2
    assert "Usage" in result.output
    gateway_cls.assert_not_called()


@pytest.mark.asyncio
async def test_run_app_exits_cleanly(gateway, console, feed):
    feed("9")

    exit_code = await run_app(gateway, console)

    assert exit_code == 0
    text = console.stdout.getvalue()
    assert "User Interface" in text
    assert "Connecting to database...Done" in text
    assert "Disconnecting from database...Done" in text
    assert text.rstrip().endswith("Bye !")
    assert not gateway.connected


@pytest.mark.asyncio
async def test_run_app_connection_failure(console, tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'retail.db'}"

    exit_code = await run_app(StoreGateway(url, echo=console.echo), console)

    assert exit_code == 1
    assert "Unable to Connect to Database" in console.stderr.getvalue()
    assert "MAIN MENU" not in console.stdout.getvalue()


@pytest.mark.asyncio
async def test_run_app_closes_connection_on_end_of_input(gateway, console, feed):
    feed("2")

    assert await run_app(gateway, console) == 0
    assert not gateway.connected
