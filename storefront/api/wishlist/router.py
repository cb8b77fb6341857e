"""Wishlist router"""

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from storefront.core.config import settings
from storefront.core.database import get_db
from storefront.services.wishlist_service import WishlistService
from storefront.schemas.wishlist import (
    WishlistItemCreate,
    WishlistItemResponse,
    WishlistLineResponse,
    WishlistRemoveResponse,
    WishlistCheckResponse,
)
from storefront.utils.dependencies import get_session_id

router = APIRouter()

@router.get("", response_model=List[WishlistLineResponse])
async def get_wishlist(
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Get wishlist entries with their products"""
    return await WishlistService(db).list_items(session_id)

@router.post("", response_model=WishlistItemResponse, status_code=status.HTTP_201_CREATED)
async def add_to_wishlist(
    item_data: WishlistItemCreate,
    response: Response,
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Add product to wishlist; an existing entry is returned with 200"""
    item, created = await WishlistService(db).add(session_id, item_data.product_id)
    if not created:
        response.status_code = status.HTTP_200_OK
    return item

@router.delete("/{product_id}", response_model=WishlistRemoveResponse)
async def remove_from_wishlist(
    product_id: int = Path(..., ge=1, le=settings.MAX_PRODUCT_ID),
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Remove product from wishlist"""
    removed = await WishlistService(db).remove(session_id, product_id)
    message = "Item removed from wishlist" if removed else "Item was not in wishlist"
    return WishlistRemoveResponse(message=message, removed=removed)

@router.get("/check/{product_id}", response_model=WishlistCheckResponse)
async def check_wishlist(
    product_id: int = Path(..., ge=1, le=settings.MAX_PRODUCT_ID),
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Check whether a product is in the wishlist"""
    return WishlistCheckResponse(
        is_in_wishlist=await WishlistService(db).is_member(session_id, product_id)
    )
