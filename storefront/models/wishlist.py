"""
Wishlist model for saved products
"""

from sqlalchemy import Column, Integer, String, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base, CreatedAtModel

class WishlistItem(Base, CreatedAtModel):
    """Session wishlist items"""

    __tablename__ = "wishlist_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(String(255), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    # Relationships
    product = relationship("Product", back_populates="wishlist_items")

    # Constraints
    __table_args__ = (
        UniqueConstraint("session_id", "product_id", name="uq_session_product_wishlist"),
        Index("idx_wishlist_session", "session_id"),
    )
