"""
Wishlist schemas
"""

from pydantic import Field
from datetime import datetime

from storefront.core.config import settings
from .base import BaseSchema
from .product import ProductResponse

class WishlistItemCreate(BaseSchema):
    product_id: int = Field(..., ge=1, le=settings.MAX_PRODUCT_ID)

class WishlistItemResponse(BaseSchema):
    id: int
    session_id: str
    product_id: int
    created_at: datetime

class WishlistLineResponse(WishlistItemResponse):
    """Wishlist entry joined with its product"""
    product: ProductResponse

class WishlistRemoveResponse(BaseSchema):
    message: str
    removed: bool

class WishlistCheckResponse(BaseSchema):
    is_in_wishlist: bool
