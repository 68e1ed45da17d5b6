import pytest
from sqlalchemy import select
from retail.models.product import Product
from retail.models.product_update import ProductUpdate
from retail.models.supply_request import ProductSupplyRequest
from retail.services.product_service import ProductService


async def product_row(gateway, store_id, name):
    rows = await gateway.execute_query_rows(
        select(Product.number_of_units, Product.price_per_unit).where(
            Product.store_id == store_id, Product.product_name == name
        )
    )
    return rows[0] if rows else None


async def audit_rows(gateway):
    return await gateway.execute_query_rows(
        select(ProductUpdate.manager_id, ProductUpdate.store_id, ProductUpdate.product_name)
        .order_by(ProductUpdate.update_number)
    )


@pytest.fixture
def two_stores(seed):
    async def _setup():
        mine = await seed.user("mine", role="manager")
        other = await seed.user("other", role="manager")
        await seed.store(1, "Mine", 0.0, 0.0, mine)
        await seed.store(2, "Other", 0.0, 0.0, other)
        await seed.product(1, "Milk", units=10, price=1.0)
        await seed.product(2, "Milk", units=10, price=1.0)
        return mine, other

    return _setup


@pytest.mark.asyncio
async def test_manager_updates_own_store(gateway, two_stores):
    mine, _ = await two_stores()

    updated = await ProductService(gateway).update_as_manager(mine, 1, "Milk", 50, 2.5)

    assert updated == 1
    assert await product_row(gateway, 1, "Milk") == ["50", "2.5"]
    # Товар с тем же названием в другом магазине не затронут
    assert await product_row(gateway, 2, "Milk") == ["10", "1.0"]
    assert await audit_rows(gateway) == [[str(mine), "1", "Milk"]]


@pytest.mark.asyncio
async def test_manager_update_foreign_store_still_audited(gateway, two_stores):
    mine, _ = await two_stores()

    updated = await ProductService(gateway).update_as_manager(mine, 2, "Milk", 99, 9.9)

    assert updated == 0
    assert await product_row(gateway, 2, "Milk") == ["10", "1.0"]
    assert await audit_rows(gateway) == [[str(mine), "2", "Milk"]]


@pytest.mark.asyncio
async def test_admin_update_renames_and_audits_old_name(gateway, two_stores, seed):
    await two_stores()
    admin_id = await seed.user("root", role="admin")

    updated = await ProductService(gateway).update_as_admin(
        admin_id, 2, "Milk", "Oat Milk", 5, 3.0
    )

    assert updated == 1
    assert await product_row(gateway, 2, "Milk") is None
    assert await product_row(gateway, 2, "Oat Milk") == ["5", "3.0"]
    assert await audit_rows(gateway) == [[str(admin_id), "2", "Milk"]]


@pytest.mark.asyncio
async def test_supply_request_increments_units(gateway, two_stores, seed):
    mine, _ = await two_stores()
    await seed.warehouse(7)

    request_number = await ProductService(gateway).request_supply(mine, 1, "Milk", 15, 7)

    assert request_number is not None
    assert await product_row(gateway, 1, "Milk") == ["25", "1.0"]
    rows = await gateway.execute_query_rows(
        select(
            ProductSupplyRequest.manager_id,
            ProductSupplyRequest.warehouse_id,
            ProductSupplyRequest.store_id,
            ProductSupplyRequest.product_name,
            ProductSupplyRequest.units_requested,
        )
    )
    assert rows == [[str(mine), "7", "1", "Milk", "15"]]


@pytest.mark.asyncio
async def test_recent_updates_limited_to_five_of_own_stores(gateway, two_stores, console):
    mine, other = await two_stores()
    svc = ProductService(gateway)
    for units in range(7):
        await svc.update_as_manager(mine, 1, "Milk", units, 1.0)
    await svc.update_as_manager(other, 2, "Milk", 1, 1.0)

    assert await svc.print_recent_updates(mine) == 5
    assert await svc.print_all_updates() == 8


@pytest.mark.asyncio
async def test_print_products_for_store(gateway, two_stores, seed, console):
    await two_stores()
    await seed.product(1, "Bread", units=4, price=2.0)

    count = await ProductService(gateway).print_products(1)

    assert count == 2
    rows = [line.split("\t") for line in console.stdout.getvalue().splitlines()[1:]]
    assert sorted(rows) == [["Bread", "4", "2.0"], ["Milk", "10", "1.0"]]
