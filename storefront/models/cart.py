"""
Shopping cart model
Carts are keyed by an opaque session id
"""

from sqlalchemy import Column, String, Integer, ForeignKey, Index, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship

from .base import Base, TimestampedModel

class CartItem(Base, TimestampedModel):
    """Shopping cart line"""

    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Owner
    session_id = Column(String(255), nullable=False)

    # Product
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    quantity = Column(Integer, nullable=False, default=1)

    # Relationships
    product = relationship("Product", back_populates="cart_items")

    # Constraints
    __table_args__ = (
        UniqueConstraint("session_id", "product_id", name="uq_cart_session_product"),
        CheckConstraint("quantity > 0", name="check_positive_cart_quantity"),
        Index("idx_cart_items_session", "session_id"),
    )
