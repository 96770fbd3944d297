"""
Catalog models read by the cart: products and their variants.

The catalog itself is managed elsewhere; the cart only reads stock, prices
and the product status.
"""

from typing import List

from sqlalchemy import CheckConstraint, Column, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin, new_id


class Product(Base, TimestampMixin):
    """Productos del catálogo"""

    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True)
    description = Column(Text)
    status = Column(String(20), nullable=False, default="DRAFT")  # DRAFT, PUBLISHED, ARCHIVED

    variants: Mapped[List["ProductVariant"]] = relationship(
        "ProductVariant", back_populates="product", cascade="all, delete-orphan"
    )

    __table_args__ = (Index("idx_products_status", status),)


class ProductVariant(Base):
    """Variantes (SKU) con stock y precio propios"""

    __tablename__ = "product_variants"

    id = Column(String(36), primary_key=True, default=new_id)
    product_id = Column(String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    sku = Column(String(100), unique=True)
    price = Column(Numeric(19, 4), nullable=False)
    sale_price = Column(Numeric(19, 4))
    stock_quantity = Column(Integer, nullable=False, default=0)

    product: Mapped["Product"] = relationship("Product", back_populates="variants")

    __table_args__ = (
        CheckConstraint("price >= 0", name="check_variant_price_non_negative"),
        CheckConstraint("stock_quantity >= 0", name="check_variant_stock_non_negative"),
        Index("idx_product_variants_product", product_id),
    )
