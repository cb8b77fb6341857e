import pytest

from storefront.core.exceptions import ValidationException
from storefront.services.wishlist_service import WishlistService

async def test_add_is_idempotent(db_session):
    service = WishlistService(db_session)
    item, created = await service.add("s1", 3)
    again, created_again = await service.add("s1", 3)

    assert created is True
    assert created_again is False
    assert again.id == item.id
    assert len(await service.list_items("s1")) == 1

async def test_membership_and_removal(db_session):
    service = WishlistService(db_session)
    await service.add("s1", 3)

    assert await service.is_member("s1", 3) is True
    assert await service.is_member("s2", 3) is False

    assert await service.remove("s1", 3) is True
    assert await service.remove("s1", 3) is False
    assert await service.is_member("s1", 3) is False

async def test_list_joins_products(db_session):
    service = WishlistService(db_session)
    await service.add("s1", 4)
    await service.add("s1", 1)

    items = await service.list_items("s1")
    assert [item.product.name for item in items] == ["Magic Unicorn", "Kawaii Cat Squishy"]

async def test_unknown_product_is_rejected(db_session):
    with pytest.raises(ValidationException):
        await WishlistService(db_session).add("s1", 999)
