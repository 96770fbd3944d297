"""
Cart Domain Value Objects
"""

from storefront.domains.cart.domain.value_objects.cart_owner import (
    CartOwner,
    GuestOwner,
    UserOwner,
    owner_from_identity,
)
from storefront.domains.cart.domain.value_objects.price import Price, to_decimal
from storefront.domains.cart.domain.value_objects.product_status import ProductStatus
from storefront.domains.cart.domain.value_objects.slug import Slug
from storefront.domains.cart.domain.value_objects.variant_snapshot import VariantSnapshot

__all__ = [
    "CartOwner",
    "UserOwner",
    "GuestOwner",
    "owner_from_identity",
    "Price",
    "to_decimal",
    "ProductStatus",
    "Slug",
    "VariantSnapshot",
]
