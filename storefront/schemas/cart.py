"""
Cart schemas for request/response validation
"""

from pydantic import Field
from typing import List
from datetime import datetime

from storefront.core.config import settings
from .base import BaseSchema, Money, MoneyTotal, MAX_DB_INT
from .product import ProductResponse

class CartItemCreate(BaseSchema):
    """Schema for adding an item to the cart"""
    product_id: int = Field(..., ge=1, le=settings.MAX_PRODUCT_ID, description="Product ID")
    quantity: int = Field(default=1, ge=1, le=MAX_DB_INT, description="Quantity to add")

class CartItemUpdate(BaseSchema):
    """Schema for setting a cart item quantity; 0 removes the item"""
    quantity: int = Field(..., ge=0, le=MAX_DB_INT, description="New quantity")

class CartItemResponse(BaseSchema):
    """Stored cart line"""
    id: int
    session_id: str
    product_id: int
    quantity: int
    created_at: datetime
    updated_at: datetime

class CartLineResponse(CartItemResponse):
    """Cart line joined with its product"""
    product: ProductResponse

class CartResponse(BaseSchema):
    """Full cart with derived totals"""
    items: List[CartLineResponse]
    total_items: int
    total_price: MoneyTotal
