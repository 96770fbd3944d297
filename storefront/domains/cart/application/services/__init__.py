"""
Cart Application Services
"""

from storefront.domains.cart.application.services.cart_cache import (
    DEFAULT_CART_CACHE_TTL,
    CartCacheInvalidator,
    CartCacheKeys,
)

__all__ = [
    "CartCacheInvalidator",
    "CartCacheKeys",
    "DEFAULT_CART_CACHE_TTL",
]
