"""Services package"""

from .cart_service import CartService
from .wishlist_service import WishlistService
from .game_service import GameService
from .reward_service import RewardService

__all__ = [
    "CartService",
    "WishlistService",
    "GameService",
    "RewardService",
]
