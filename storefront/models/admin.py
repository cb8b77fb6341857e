"""
Back-office models
Sales, reservations, inventory and admin accounts
"""

from sqlalchemy import Column, String, Integer, Text, Numeric, Boolean, DateTime, Index, CheckConstraint
from typing import Optional

from .base import Base, TimestampedModel

LOW_STOCK_THRESHOLD = 1

def derive_inventory_status(stock: int, status: Optional[str]) -> str:
    """
    Status shown for an inventory row.
    Sold out wins over everything, an item in transit stays Shipping,
    a single remaining unit is Low stock, otherwise the stored status.
    """
    if stock == 0:
        return "Sold out"
    if status == "Shipping":
        return "Shipping"
    if stock <= LOW_STOCK_THRESHOLD:
        return "Low stock"
    return status or "Available"

class Sale(Base, TimestampedModel):
    """Completed sale"""

    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer = Column(String(100), nullable=False)
    item = Column(String(100), nullable=False)
    qty = Column(Integer, nullable=False, default=1)
    price_paid = Column(Numeric(10, 2), nullable=False)
    pickup_date = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)

class Reservation(Base, TimestampedModel):
    """Reserved item awaiting pickup"""

    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer = Column(String(100), nullable=False)
    item = Column(String(100), nullable=False)
    price_paid = Column(Numeric(10, 2), nullable=False)
    qty = Column(Integer, nullable=False, default=1)
    date_sold = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)

class InventoryItem(Base, TimestampedModel):
    """Stock ledger row"""

    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order = Column(String(50), nullable=True)
    type = Column(String(50), nullable=True)
    item = Column(String(100), nullable=False)
    retail_price = Column(Numeric(10, 2), nullable=True)
    resell_price = Column(Numeric(10, 2), nullable=True)
    stock = Column(Integer, nullable=False, default=0)
    status = Column(String(50), nullable=False, default="Available")
    track = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint("stock >= 0", name="check_non_negative_stock"),
        Index("idx_inventory_stock", "stock"),
    )

    @property
    def display_status(self) -> str:
        return derive_inventory_status(self.stock, self.status)

class AdminUser(Base, TimestampedModel):
    """Back-office account"""

    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default="admin")
    is_active = Column(Boolean, nullable=False, default=True)
    last_login = Column(DateTime(timezone=True), nullable=True)
