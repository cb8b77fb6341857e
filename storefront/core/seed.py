"""
Initial data
Catalog, rewards, back-office sample rows and the default admin account
"""

from decimal import Decimal
import logging

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models import (
    Product, GameReward, Sale, Reservation, InventoryItem, AdminUser
)
from .config import settings
from .security import SecurityUtils

logger = logging.getLogger(__name__)

_IMAGE = "https://images.unsplash.com/photo-{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=600"

PRODUCTS = [
    {
        "name": "Kawaii Cat Squishy",
        "description": "Adorable cat-shaped stress relief toy with big eyes and soft texture",
        "price": Decimal("12.99"),
        "original_price": Decimal("16.99"),
        "image": _IMAGE.format("1545249390-6bdfa286032f"),
        "category": "kawaii",
        "tags": ["cat", "kawaii", "stress-relief"],
        "featured": True,
    },
    {
        "name": "Stress Relief Ball",
        "description": "Perfect for hand exercise and stress relief therapy",
        "price": Decimal("8.99"),
        "original_price": Decimal("11.99"),
        "image": _IMAGE.format("1612198188060-c7c2a3b66eae"),
        "category": "stress-relief",
        "tags": ["stress-relief", "therapy", "exercise"],
        "featured": True,
    },
    {
        "name": "Slow Rise Panda",
        "description": "Super soft slow-rising panda squishy with authentic scent",
        "price": Decimal("15.99"),
        "image": _IMAGE.format("1564349683136-77e08dba1ef7"),
        "category": "kawaii",
        "tags": ["panda", "slow-rise", "scented"],
        "featured": True,
    },
    {
        "name": "Magic Unicorn",
        "description": "Sparkly unicorn with rainbow mane and glittery finish",
        "price": Decimal("18.99"),
        "image": _IMAGE.format("1587654780291-39c9404d746b"),
        "category": "kawaii",
        "tags": ["unicorn", "rainbow", "sparkly"],
        "featured": True,
    },
    {
        "name": "Pop It Fidget",
        "description": "Satisfying bubble popping experience for focus and relaxation",
        "price": Decimal("6.99"),
        "image": _IMAGE.format("1558618666-fcd25c85cd64"),
        "category": "fidget",
        "tags": ["pop-it", "fidget", "focus"],
        "featured": False,
    },
    {
        "name": "Sweet Donut",
        "description": "Delicious-looking donut squishy with realistic frosting texture",
        "price": Decimal("9.99"),
        "image": _IMAGE.format("1551024506-0bccd828d307"),
        "category": "food",
        "tags": ["donut", "sweet", "realistic"],
        "featured": False,
    },
    {
        "name": "Therapy Putty",
        "description": "Professional-grade stress relief putty for hand strengthening",
        "price": Decimal("14.99"),
        "image": _IMAGE.format("1578662996442-48f60103fc96"),
        "category": "therapy",
        "tags": ["therapy", "professional", "strengthening"],
        "featured": False,
    },
    {
        "name": "Mini Collection Set",
        "description": "Set of 6 mini squishy characters in various designs",
        "price": Decimal("24.99"),
        "original_price": Decimal("35.99"),
        "image": _IMAGE.format("1558618666-fcd25c85cd64"),
        "category": "sets",
        "tags": ["mini", "collection", "variety"],
        "featured": True,
    },
]

REWARDS = [
    {
        "name": "5% Discount",
        "description": "Get 5% off your next purchase",
        "points_cost": 100,
        "reward_type": "discount",
        "reward_value": "5",
    },
    {
        "name": "10% Discount",
        "description": "Get 10% off your next purchase",
        "points_cost": 250,
        "reward_type": "discount",
        "reward_value": "10",
    },
    {
        "name": "Free Shipping",
        "description": "Free shipping on your next order",
        "points_cost": 150,
        "reward_type": "discount",
        "reward_value": "free_shipping",
    },
    {
        "name": "Kawaii Champion Badge",
        "description": "Exclusive kawaii champion badge for your profile",
        "points_cost": 500,
        "reward_type": "badge",
        "reward_value": "kawaii_champion",
    },
    {
        "name": "20% Mega Discount",
        "description": "Massive 20% discount for dedicated players",
        "points_cost": 1000,
        "reward_type": "discount",
        "reward_value": "20",
        "max_redemptions": 10,
    },
]

_BUYERS = [
    ("Shelby", "SISI", "50.00"),
    ("Regina", "SISI", "50.00"),
    ("Andrew", "BABA", "50.00"),
    ("Meaghan", "QUQU", "50.00"),
    ("SaroSH", "SEA SALT COCONUT", "60.00"),
    ("Liam", "TOFFEE", "30.00"),
]

SALES = [
    {
        "customer": customer,
        "item": item,
        "qty": 1,
        "price_paid": Decimal(price),
        "pickup_date": "6/14/2025",
        "notes": "trading opened Sisi for Dada" if customer == "Shelby" else "",
    }
    for customer, item, price in _BUYERS
]

RESERVATIONS = [
    {
        "customer": customer,
        "item": item,
        "qty": 1,
        "price_paid": Decimal("50.00") if customer == "Liam" else Decimal(price),
        "date_sold": "mm/dd/yyyy",
        "notes": "trading Sisi for their Dada" if customer == "Shelby" else "",
    }
    for customer, item, price in _BUYERS
]

# order, type, item, resell price, stock, track
_STOCK = [
    ("N/A", "MAC", "SEA SALT COCONUT", "60.00", 1, "PARCEL"),
    ("GROUP 2", "MAC", "GREEN GRAPE", "60.00", 1, "PARCEL 2"),
    ("GROUP 1", "MAC", "TOFFEE", "60.00", 1, "PARCEL 1"),
    ("", "MAC", "LYCHEE BERRY", "60.00", 0, ""),
    ("", "MAC", "SESAME BEAN", "60.00", 0, ""),
    ("", "MAC", "SOYMILK", "60.00", 0, ""),
    ("GROUP 1", "HAS", "ZIZI", "60.00", 1, "PARCEL 1"),
    ("GROUP 1", "HAS", "BABA", "50.00", 1, "PARCEL 1"),
    ("GROUP 3", "HAS", "QUQU", "60.00", 1, "PARCEL 3"),
    ("GROUP 3", "HAS", "SHOO", "50.00", 1, "PARCEL 3"),
    ("GROUP 3", "HAS", "SISI", "60.00", 1, "PARCEL 3"),
    ("", "HAS", "DADA", "50.00", 0, ""),
]

INVENTORY = [
    {
        "order": order,
        "type": kind,
        "item": item,
        "retail_price": Decimal("30.00"),
        "resell_price": Decimal(resell),
        "stock": stock,
        "status": "Shipping" if stock else "Sold out",
        "track": track,
        "notes": "x1 Sisi has been fully opened and taken out of the box" if item == "SISI" else "",
    }
    for order, kind, item, resell, stock, track in _STOCK
]

async def _is_empty(db: AsyncSession, model) -> bool:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar() == 0

async def seed_database(db: AsyncSession) -> None:
    """Insert initial rows into empty tables; tables that already hold data are left alone"""
    for model, rows in (
        (Product, PRODUCTS),
        (GameReward, REWARDS),
        (Sale, SALES),
        (Reservation, RESERVATIONS),
        (InventoryItem, INVENTORY),
    ):
        if await _is_empty(db, model):
            db.add_all([model(**row) for row in rows])
            logger.info(f"Seeded {len(rows)} rows into {model.__tablename__}")

    result = await db.execute(
        select(AdminUser).where(AdminUser.username == settings.DEFAULT_ADMIN_USERNAME)
    )
    if result.scalar_one_or_none() is None:
        db.add(AdminUser(
            username=settings.DEFAULT_ADMIN_USERNAME,
            email=settings.DEFAULT_ADMIN_EMAIL,
            password_hash=SecurityUtils.hash_password(settings.DEFAULT_ADMIN_PASSWORD),
            role="admin",
            is_active=True,
        ))
        logger.info(f"Created default admin user '{settings.DEFAULT_ADMIN_USERNAME}'")

    await db.commit()
