"""Products API router"""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from storefront.core.database import get_db
from storefront.core.exceptions import NotFoundException
from storefront.middleware.rate_limit import search_limiter
from storefront.schemas.product import ProductResponse
from .crud import ProductCRUD

router = APIRouter()

@router.get("", response_model=List[ProductResponse])
async def get_products(db: AsyncSession = Depends(get_db)):
    """Get every product"""
    return await ProductCRUD.get_multi(db)

@router.get("/featured", response_model=List[ProductResponse])
async def get_featured_products(db: AsyncSession = Depends(get_db)):
    """Get featured products"""
    return await ProductCRUD.get_featured(db)

@router.get("/search", response_model=List[ProductResponse])
@search_limiter
async def search_products(
    request: Request,
    q: Optional[str] = Query(None, description="Search text"),
    db: AsyncSession = Depends(get_db)
):
    """Search products by name, description, category or tag"""
    return await ProductCRUD.search(db, q)

@router.get("/category/{category}", response_model=List[ProductResponse])
async def get_products_by_category(category: str, db: AsyncSession = Depends(get_db)):
    """Get products in a category ("all" for every product)"""
    return await ProductCRUD.get_by_category(db, category)

@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, db: AsyncSession = Depends(get_db)):
    """Get product by ID"""
    product = await ProductCRUD.get_by_id(db, product_id)
    if not product:
        raise NotFoundException("Product not found")
    return product
