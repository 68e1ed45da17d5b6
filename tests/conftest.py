import io
import pytest
import pytest_asyncio
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
import sys
from pathlib import Path


sys.path.append(str(Path(__file__).resolve().parent.parent))

from retail.core.database import Base, StoreGateway
from retail.models import Product, Store, User, Warehouse
from retail.utils.console import Console


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def console():
    return Console(stdin=io.StringIO(), stdout=io.StringIO(), stderr=io.StringIO())


@pytest.fixture
def feed(console):
    """Подставляет строки ввода пользователя в консоль"""

    def _feed(*lines):
        console.stdin = io.StringIO("".join(f"{line}\n" for line in lines))

    return _feed


@pytest_asyncio.fixture
async def gateway(engine, console):
    gateway = StoreGateway(engine=engine, echo=console.echo)
    await gateway.connect()
    yield gateway
    await gateway.close()


class Seeder:
    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    async def user(self, name, password="pw", latitude=0.0, longitude=0.0, role="customer"):
        return await self.gateway.execute_insert(
            insert(User).values(
                {
                    User.name: name,
                    User.password: password,
                    User.latitude: latitude,
                    User.longitude: longitude,
                    User.role: role,
                }
            )
        )

    async def store(self, store_id, name, latitude, longitude, manager_id):
        await self.gateway.execute_update(
            insert(Store).values(
                {
                    Store.id: store_id,
                    Store.name: name,
                    Store.latitude: latitude,
                    Store.longitude: longitude,
                    Store.manager_id: manager_id,
                }
            )
        )
        return store_id

    async def product(self, store_id, name, units=10, price=1.5):
        await self.gateway.execute_update(
            insert(Product).values(
                {
                    Product.store_id: store_id,
                    Product.product_name: name,
                    Product.number_of_units: units,
                    Product.price_per_unit: price,
                }
            )
        )

    async def warehouse(self, warehouse_id, latitude=0.0, longitude=0.0):
        await self.gateway.execute_update(
            insert(Warehouse).values(
                {
                    Warehouse.id: warehouse_id,
                    Warehouse.area: 100.0,
                    Warehouse.latitude: latitude,
                    Warehouse.longitude: longitude,
                }
            )
        )
        return warehouse_id


@pytest.fixture
def seed(gateway):
    return Seeder(gateway)
