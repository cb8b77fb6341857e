"""Product catalog model"""

from sqlalchemy import Column, Integer, String, Text, Numeric, Boolean, JSON, Index, CheckConstraint
from sqlalchemy.orm import relationship

from .base import Base, CreatedAtModel

# Categories the storefront exposes; "all" is accepted by the API as a wildcard
PRODUCT_CATEGORIES = ("kawaii", "stress-relief", "fidget", "food", "therapy", "sets")

class Product(Base, CreatedAtModel):
    """Sellable product"""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Basic info
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    image = Column(String(500), nullable=False)

    # Categorization
    category = Column(String(50), nullable=False, index=True)
    tags = Column(JSON, nullable=False, default=list)

    # Pricing
    price = Column(Numeric(10, 2), nullable=False)
    original_price = Column(Numeric(10, 2), nullable=True)

    # Flags
    in_stock = Column(Boolean, nullable=False, default=True)
    featured = Column(Boolean, nullable=False, default=False, index=True)

    # Relationships
    cart_items = relationship("CartItem", back_populates="product")
    wishlist_items = relationship("WishlistItem", back_populates="product")

    # Constraints
    __table_args__ = (
        CheckConstraint("price >= 0", name="check_non_negative_price"),
        Index("idx_products_category_featured", "category", "featured"),
    )
