"""
Cart service for managing cart operations
"""

from typing import List, Optional, Dict, Any
from decimal import Decimal
import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import contains_eager

from storefront.models import CartItem, Product
from storefront.core.config import settings
from storefront.core.exceptions import ValidationException, CartQuantityException
from storefront.core.locks import session_locks

logger = logging.getLogger(__name__)

class CartService:
    """
    Service for managing per-session carts
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.max_quantity = settings.MAX_CART_ITEM_QUANTITY

    def _line_query(self, session_id: str, product_id: int):
        return select(CartItem).where(
            and_(
                CartItem.session_id == session_id,
                CartItem.product_id == product_id
            )
        )

    async def add_to_cart(
        self,
        session_id: str,
        product_id: int,
        quantity: int = 1
    ) -> CartItem:
        """
        Add item to cart, merging into the existing line for the same product
        """
        if quantity < 1 or quantity > self.max_quantity:
            raise CartQuantityException(self.max_quantity)

        async with session_locks.acquire(session_id):
            product = await self.db.get(Product, product_id)
            if not product:
                raise ValidationException("Product not found", error_code="INVALID_PRODUCT")

            result = await self.db.execute(self._line_query(session_id, product_id))
            cart_item = result.scalar_one_or_none()

            if cart_item:
                if cart_item.quantity + quantity > self.max_quantity:
                    raise CartQuantityException(self.max_quantity)
                cart_item.quantity += quantity
            else:
                cart_item = CartItem(
                    session_id=session_id,
                    product_id=product_id,
                    quantity=quantity
                )
                self.db.add(cart_item)

            try:
                await self.db.commit()
            except IntegrityError:
                # Line inserted by another worker; merge into it
                await self.db.rollback()
                cart_item = await self._merge_existing(session_id, product_id, quantity)

            await self.db.refresh(cart_item)
            return cart_item

    async def _merge_existing(self, session_id: str, product_id: int, quantity: int) -> CartItem:
        result = await self.db.execute(
            update(CartItem)
            .where(
                and_(
                    CartItem.session_id == session_id,
                    CartItem.product_id == product_id,
                    CartItem.quantity + quantity <= self.max_quantity
                )
            )
            .values(quantity=CartItem.quantity + quantity)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            await self.db.rollback()
            raise CartQuantityException(self.max_quantity)
        await self.db.commit()

        result = await self.db.execute(self._line_query(session_id, product_id))
        return result.scalar_one()

    async def list_cart(self, session_id: str) -> List[CartItem]:
        """
        Cart lines with their products; lines whose product is gone are dropped
        """
        result = await self.db.execute(
            select(CartItem)
            .join(CartItem.product)
            .options(contains_eager(CartItem.product))
            .where(CartItem.session_id == session_id)
            .order_by(CartItem.id)
        )
        return list(result.scalars().all())

    async def get_cart(self, session_id: str) -> Dict[str, Any]:
        """
        Cart lines plus totals, recomputed on every read
        """
        items = await self.list_cart(session_id)
        total_items = sum(item.quantity for item in items)
        total_price = sum(
            (Decimal(item.product.price) * item.quantity for item in items),
            Decimal("0.00")
        )
        return {
            "items": items,
            "total_items": total_items,
            "total_price": total_price,
        }

    async def update_quantity(
        self,
        session_id: str,
        item_id: int,
        quantity: int
    ) -> Optional[CartItem]:
        """
        Set a line quantity directly; 0 removes the line.
        Returns None when the line does not exist or was removed.
        """
        if quantity < 0 or quantity > self.max_quantity:
            raise ValidationException(
                f"Quantity must be between 0 and {self.max_quantity}",
                error_code="INVALID_QUANTITY"
            )

        if quantity == 0:
            await self.remove_from_cart(session_id, item_id)
            return None

        result = await self.db.execute(
            select(CartItem).where(
                and_(
                    CartItem.id == item_id,
                    CartItem.session_id == session_id
                )
            )
        )
        cart_item = result.scalar_one_or_none()
        if not cart_item:
            return None

        cart_item.quantity = quantity
        await self.db.commit()
        await self.db.refresh(cart_item)
        return cart_item

    async def remove_from_cart(self, session_id: str, item_id: int) -> bool:
        """
        Remove a line from the session's cart
        """
        result = await self.db.execute(
            delete(CartItem)
            .where(
                and_(
                    CartItem.id == item_id,
                    CartItem.session_id == session_id
                )
            )
            .execution_options(synchronize_session="fetch")
        )
        await self.db.commit()
        return result.rowcount > 0

    async def clear_cart(self, session_id: str) -> int:
        """
        Remove every line for the session
        """
        result = await self.db.execute(
            delete(CartItem)
            .where(CartItem.session_id == session_id)
            .execution_options(synchronize_session="fetch")
        )
        await self.db.commit()
        logger.info(f"Cleared {result.rowcount} cart lines for session {session_id[:8]}")
        return result.rowcount
