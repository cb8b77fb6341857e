"""Models package initialization"""

from .base import Base, utcnow
from .product import Product, PRODUCT_CATEGORIES
from .cart import CartItem
from .wishlist import WishlistItem
from .game import UserProfile, GameScore, GameReward, UserReward
from .admin import Sale, Reservation, InventoryItem, AdminUser, derive_inventory_status

__all__ = [
    "Base",
    "utcnow",
    "Product",
    "PRODUCT_CATEGORIES",
    "CartItem",
    "WishlistItem",
    "UserProfile",
    "GameScore",
    "GameReward",
    "UserReward",
    "Sale",
    "Reservation",
    "InventoryItem",
    "AdminUser",
    "derive_inventory_status",
]
