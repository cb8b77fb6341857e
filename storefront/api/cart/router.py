"""Cart router with session-scoped carts"""

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Union

from storefront.core.database import get_db
from storefront.core.exceptions import NotFoundException
from storefront.services.cart_service import CartService
from storefront.schemas.base import MessageResponse, MAX_DB_INT
from storefront.schemas.cart import (
    CartItemCreate, CartItemUpdate, CartItemResponse, CartResponse
)
from storefront.utils.dependencies import get_session_id

router = APIRouter()

@router.get("", response_model=CartResponse)
async def get_cart(
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Get cart lines with totals"""
    return await CartService(db).get_cart(session_id)

@router.post("", response_model=CartItemResponse, status_code=status.HTTP_201_CREATED)
async def add_to_cart(
    item_data: CartItemCreate,
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Add item to cart"""
    return await CartService(db).add_to_cart(
        session_id=session_id,
        product_id=item_data.product_id,
        quantity=item_data.quantity
    )

@router.patch("/{item_id}", response_model=Union[CartItemResponse, MessageResponse])
async def update_cart_item(
    update_data: CartItemUpdate,
    item_id: int = Path(..., ge=1, le=MAX_DB_INT),
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Update cart item quantity; 0 removes the item"""
    service = CartService(db)

    if update_data.quantity == 0:
        if not await service.remove_from_cart(session_id, item_id):
            raise NotFoundException("Cart item not found")
        return MessageResponse(message="Item removed from cart")

    cart_item = await service.update_quantity(session_id, item_id, update_data.quantity)
    if not cart_item:
        raise NotFoundException("Cart item not found")
    return cart_item

@router.delete("/{item_id}", response_model=MessageResponse)
async def remove_from_cart(
    item_id: int = Path(..., ge=1, le=MAX_DB_INT),
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Remove item from cart"""
    if not await CartService(db).remove_from_cart(session_id, item_id):
        raise NotFoundException("Cart item not found")
    return MessageResponse(message="Item removed from cart")

@router.delete("", response_model=MessageResponse)
async def clear_cart(
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Remove every item from the cart"""
    await CartService(db).clear_cart(session_id)
    return MessageResponse(message="Cart cleared")
