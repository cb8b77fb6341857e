from decimal import Decimal

import pytest

from storefront.api.admin.crud import SalesCRUD, ReservationCRUD, InventoryCRUD
from storefront.models import derive_inventory_status

@pytest.mark.parametrize("stock, status, expected", [
    (0, "Shipping", "Sold out"),
    (0, "Available", "Sold out"),
    (1, "Shipping", "Shipping"),
    (5, "Shipping", "Shipping"),
    (1, "Available", "Low stock"),
    (5, "", "Available"),
    (5, None, "Available"),
    (5, "Reserved", "Reserved"),
])
def test_inventory_display_status(stock, status, expected):
    assert derive_inventory_status(stock, status) == expected

async def test_sales_newest_first(db_session):
    sales = await SalesCRUD(db_session).get_multi()
    ids = [s.id for s in sales]
    assert len(ids) == 6
    assert ids == sorted(ids, reverse=True)

async def test_search_is_case_insensitive_over_fields(db_session):
    crud = SalesCRUD(db_session)
    assert {s.customer for s in await crud.get_multi("sisi")} == {"Shelby", "Regina"}
    # Matches the notes column only
    assert [s.customer for s in await crud.get_multi("DADA")] == ["Shelby"]
    assert len(await crud.get_multi("   ")) == 6

    inventory = InventoryCRUD(db_session)
    assert {i.item for i in await inventory.get_multi("parcel 3")} == {"QUQU", "SHOO", "SISI"}
    assert {i.item for i in await inventory.get_multi("has")} == {"ZIZI", "BABA", "QUQU", "SHOO", "SISI", "DADA"}

async def test_create_update_delete(db_session):
    crud = ReservationCRUD(db_session)
    created = await crud.create({
        "customer": "Nova",
        "item": "MOMO",
        "price_paid": Decimal("45.00"),
        "qty": 2,
        "date_sold": "07/2025",
        "notes": None,
    })
    assert created.id is not None
    assert created.created_at is not None
    stamped = created.updated_at

    updated = await crud.update(created.id, {"notes": "paid in cash"})
    assert updated.notes == "paid in cash"
    assert updated.customer == "Nova"
    assert updated.qty == 2
    assert updated.updated_at > stamped

    assert (await crud.get_multi())[0].id == created.id

    assert await crud.delete(created.id) is True
    assert await crud.get(created.id) is None
    assert await crud.delete(created.id) is False
    assert await crud.update(created.id, {"notes": "x"}) is None

async def test_inventory_summary(db_session):
    summary = await InventoryCRUD(db_session).summary()
    assert summary == {"total": 12, "low_stock": 8, "sold_out": 4}

async def test_seeded_inventory_display_status(db_session):
    items = {i.item: i for i in await InventoryCRUD(db_session).get_multi()}
    assert items["SEA SALT COCONUT"].display_status == "Shipping"
    assert items["LYCHEE BERRY"].display_status == "Sold out"
