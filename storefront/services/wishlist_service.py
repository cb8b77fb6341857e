"""
Wishlist service
"""

from typing import List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import contains_eager

from storefront.models import WishlistItem, Product
from storefront.core.exceptions import ValidationException
from storefront.core.locks import session_locks

class WishlistService:
    """Per-session set of liked products"""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _pair_query(self, session_id: str, product_id: int):
        return select(WishlistItem).where(
            and_(
                WishlistItem.session_id == session_id,
                WishlistItem.product_id == product_id
            )
        )

    async def add(self, session_id: str, product_id: int) -> Tuple[WishlistItem, bool]:
        """
        Add a product; returns the row and whether it was newly created
        """
        async with session_locks.acquire(session_id):
            product = await self.db.get(Product, product_id)
            if not product:
                raise ValidationException("Product not found", error_code="INVALID_PRODUCT")

            result = await self.db.execute(self._pair_query(session_id, product_id))
            existing = result.scalar_one_or_none()
            if existing:
                return existing, False

            item = WishlistItem(session_id=session_id, product_id=product_id)
            self.db.add(item)
            try:
                await self.db.commit()
            except IntegrityError:
                await self.db.rollback()
                result = await self.db.execute(self._pair_query(session_id, product_id))
                return result.scalar_one(), False

            await self.db.refresh(item)
            return item, True

    async def remove(self, session_id: str, product_id: int) -> bool:
        result = await self.db.execute(
            delete(WishlistItem)
            .where(
                and_(
                    WishlistItem.session_id == session_id,
                    WishlistItem.product_id == product_id
                )
            )
            .execution_options(synchronize_session="fetch")
        )
        await self.db.commit()
        return result.rowcount > 0

    async def is_member(self, session_id: str, product_id: int) -> bool:
        result = await self.db.execute(
            self._pair_query(session_id, product_id).with_only_columns(WishlistItem.id)
        )
        return result.first() is not None

    async def list_items(self, session_id: str) -> List[WishlistItem]:
        """Entries joined with their products, oldest first"""
        result = await self.db.execute(
            select(WishlistItem)
            .join(WishlistItem.product)
            .options(contains_eager(WishlistItem.product))
            .where(WishlistItem.session_id == session_id)
            .order_by(WishlistItem.id)
        )
        return list(result.scalars().all())
