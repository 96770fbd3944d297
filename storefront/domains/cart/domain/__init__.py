"""
Cart Domain Layer

Entities, value objects, domain services and exceptions for the cart.
"""

from storefront.domains.cart.domain.entities import Cart, CartItem
from storefront.domains.cart.domain.events import CartItemAdded, CartReassigned
from storefront.domains.cart.domain.services import CartValidation, CartValidationService
from storefront.domains.cart.domain.value_objects import (
    CartOwner,
    GuestOwner,
    Price,
    ProductStatus,
    Slug,
    UserOwner,
    VariantSnapshot,
)

__all__ = [
    "Cart",
    "CartItem",
    "CartItemAdded",
    "CartReassigned",
    "CartValidation",
    "CartValidationService",
    "CartOwner",
    "GuestOwner",
    "UserOwner",
    "Price",
    "ProductStatus",
    "Slug",
    "VariantSnapshot",
]
