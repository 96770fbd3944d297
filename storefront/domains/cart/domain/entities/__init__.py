"""
Cart Domain Entities
"""

from storefront.domains.cart.domain.entities.cart import Cart
from storefront.domains.cart.domain.entities.cart_item import CartItem

__all__ = [
    "Cart",
    "CartItem",
]
