"""
Database models
"""

from .base import Base, TimestampMixin
from .cart import Cart, CartItem
from .catalog import Product, ProductVariant

__all__ = [
    "Base",
    "TimestampMixin",
    "Cart",
    "CartItem",
    "Product",
    "ProductVariant",
]
