"""API routes aggregation"""

from fastapi import APIRouter

from .products.router import router as products_router
from .cart.router import router as cart_router
from .wishlist.router import router as wishlist_router
from .game.router import router as game_router
from .admin.router import router as admin_router

# Mounted under /api by the application
api_router = APIRouter()

api_router.include_router(products_router, prefix="/products", tags=["Products"])
api_router.include_router(cart_router, prefix="/cart", tags=["Cart"])
api_router.include_router(wishlist_router, prefix="/wishlist", tags=["Wishlist"])
api_router.include_router(game_router, prefix="/game", tags=["Game"])
api_router.include_router(admin_router, prefix="/admin", tags=["Admin"])
