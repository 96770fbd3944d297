"""
Cart models
"""

from datetime import UTC, datetime
from typing import List

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin, new_id
from .catalog import ProductVariant


class Cart(Base, TimestampMixin):
    """Carritos: exactamente uno de user_id o session_id"""

    __tablename__ = "carts"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(255), unique=True)
    session_id = Column(String(255), unique=True)

    items: Mapped[List["CartItem"]] = relationship(
        "CartItem", back_populates="cart", cascade="all, delete-orphan", order_by="CartItem.created_at"
    )

    __table_args__ = (
        CheckConstraint(
            "(user_id IS NULL) <> (session_id IS NULL)",
            name="check_cart_has_owner",
        ),
    )


class CartItem(Base):
    """Líneas del carrito, una por variante"""

    __tablename__ = "cart_items"

    id = Column(String(36), primary_key=True, default=new_id)
    cart_id = Column(String(36), ForeignKey("carts.id", ondelete="CASCADE"), nullable=False, index=True)
    variant_id = Column(String(36), ForeignKey("product_variants.id", ondelete="CASCADE"), nullable=False)
    quantity = Column(Integer, nullable=False)
    price_at_add = Column(Numeric(19, 4), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )

    cart: Mapped["Cart"] = relationship("Cart", back_populates="items")
    variant: Mapped["ProductVariant"] = relationship("ProductVariant")

    __table_args__ = (
        UniqueConstraint("cart_id", "variant_id", name="uq_cart_items_cart_variant"),
        CheckConstraint("quantity > 0", name="check_cart_item_quantity_positive"),
        CheckConstraint("price_at_add >= 0", name="check_cart_item_price_non_negative"),
    )
