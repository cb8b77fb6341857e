"""
Product CRUD operations
Read-only catalog queries
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_, column, String

from storefront.models import Product, PRODUCT_CATEGORIES
from storefront.core.config import settings
from storefront.core.exceptions import ValidationException

ALL_CATEGORIES = "all"

def _tag_values(dialect_name: str):
    """Table of the individual tag strings of the enclosing product row"""
    if dialect_name == "postgresql":
        elements = func.json_array_elements_text(Product.tags)
    else:
        elements = func.json_each(Product.tags)
    return elements.table_valued(column("value", String)).alias("tag")

class ProductCRUD:
    """Product catalog queries"""

    @staticmethod
    async def get_multi(db: AsyncSession) -> List[Product]:
        """All products in id order"""
        result = await db.execute(select(Product).order_by(Product.id))
        return list(result.scalars().all())

    @staticmethod
    async def get_featured(db: AsyncSession) -> List[Product]:
        result = await db.execute(
            select(Product).where(Product.featured.is_(True)).order_by(Product.id)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_by_category(db: AsyncSession, category: str) -> List[Product]:
        """Products in a whitelisted category; "all" returns the whole catalog"""
        if category == ALL_CATEGORIES:
            return await ProductCRUD.get_multi(db)
        if category not in PRODUCT_CATEGORIES:
            raise ValidationException(f"Invalid category: {category}", error_code="INVALID_CATEGORY")

        result = await db.execute(
            select(Product).where(Product.category == category).order_by(Product.id)
        )
        return list(result.scalars().all())

    @staticmethod
    async def search(db: AsyncSession, q: Optional[str]) -> List[Product]:
        """Case-insensitive substring match over name, description, category and tags"""
        term = (q or "").strip()
        if not term or len(term) > settings.SEARCH_QUERY_MAX_LENGTH:
            raise ValidationException(
                f"Search query must be between 1 and {settings.SEARCH_QUERY_MAX_LENGTH} characters",
                error_code="INVALID_SEARCH_QUERY"
            )

        term = term.lower()
        fields = [Product.name, Product.description, Product.category]
        tag = _tag_values(db.get_bind().dialect.name)
        tag_match = (
            select(tag.c.value)
            .where(func.lower(tag.c.value).contains(term, autoescape=True))
            .exists()
        )
        result = await db.execute(
            select(Product)
            .where(or_(
                *[func.lower(field).contains(term, autoescape=True) for field in fields],
                tag_match,
            ))
            .order_by(Product.id)
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_by_id(db: AsyncSession, product_id: int) -> Optional[Product]:
        if product_id < 1 or product_id > settings.MAX_PRODUCT_ID:
            raise ValidationException("Invalid product ID", error_code="INVALID_PRODUCT_ID")
        return await db.get(Product, product_id)
