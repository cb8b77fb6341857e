"""
Product schemas for response serialization
"""

from pydantic import Field
from typing import Optional, List
from datetime import datetime

from .base import BaseSchema, Money

class ProductResponse(BaseSchema):
    """Catalog product"""
    id: int
    name: str
    description: str
    price: Money
    original_price: Optional[Money] = None
    image: str
    category: str
    tags: List[str] = Field(default_factory=list)
    in_stock: bool
    featured: bool
    created_at: datetime
