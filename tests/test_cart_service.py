from decimal import Decimal

import pytest

from storefront.core.exceptions import ValidationException, CartQuantityException
from storefront.services.cart_service import CartService

# Seeded catalog: 1 = Kawaii Cat Squishy (12.99), 2 = Stress Relief Ball (8.99)

async def test_add_merges_into_existing_line(db_session):
    service = CartService(db_session)
    first = await service.add_to_cart("s1", 1, 2)
    second = await service.add_to_cart("s1", 1, 3)

    assert second.id == first.id
    assert second.quantity == 5
    items = await service.list_cart("s1")
    assert len(items) == 1

async def test_totals_are_recomputed(db_session):
    service = CartService(db_session)
    await service.add_to_cart("s1", 1, 2)
    await service.add_to_cart("s1", 2)

    cart = await service.get_cart("s1")
    assert cart["total_items"] == 3
    assert cart["total_price"] == Decimal("34.97")
    assert [item.product.name for item in cart["items"]] == ["Kawaii Cat Squishy", "Stress Relief Ball"]

async def test_empty_cart(db_session):
    cart = await CartService(db_session).get_cart("nobody")
    assert cart["items"] == []
    assert cart["total_items"] == 0
    assert cart["total_price"] == Decimal("0")

async def test_cap_applies_to_merged_quantity(db_session):
    service = CartService(db_session)
    await service.add_to_cart("s1", 1, 100)
    with pytest.raises(CartQuantityException):
        await service.add_to_cart("s1", 1, 1)

    items = await service.list_cart("s1")
    assert items[0].quantity == 100

@pytest.mark.parametrize("quantity", [0, -1, 101])
async def test_add_rejects_bad_quantity(db_session, quantity):
    with pytest.raises(ValidationException):
        await CartService(db_session).add_to_cart("s1", 1, quantity)

async def test_add_rejects_unknown_product(db_session):
    with pytest.raises(ValidationException):
        await CartService(db_session).add_to_cart("s1", 999, 1)

async def test_update_quantity(db_session):
    service = CartService(db_session)
    item = await service.add_to_cart("s1", 1, 2)

    updated = await service.update_quantity("s1", item.id, 7)
    assert updated.quantity == 7

    with pytest.raises(ValidationException):
        await service.update_quantity("s1", item.id, 101)

async def test_update_to_zero_removes_line(db_session):
    service = CartService(db_session)
    item = await service.add_to_cart("s1", 1, 2)

    assert await service.update_quantity("s1", item.id, 0) is None
    assert await service.list_cart("s1") == []

async def test_lines_are_scoped_to_their_session(db_session):
    service = CartService(db_session)
    item = await service.add_to_cart("s1", 1, 2)

    assert await service.update_quantity("s2", item.id, 5) is None
    assert await service.remove_from_cart("s2", item.id) is False

    items = await service.list_cart("s1")
    assert items[0].quantity == 2

async def test_remove_and_clear(db_session):
    service = CartService(db_session)
    item = await service.add_to_cart("s1", 1)
    await service.add_to_cart("s1", 2)
    await service.add_to_cart("s2", 1)

    assert await service.remove_from_cart("s1", item.id) is True
    assert await service.remove_from_cart("s1", item.id) is False

    assert await service.clear_cart("s1") == 1
    assert await service.list_cart("s1") == []
    assert len(await service.list_cart("s2")) == 1
