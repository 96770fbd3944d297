"""
Add Item To Cart Use Case
"""

import logging
from dataclasses import dataclass

from storefront.core.interfaces.cache import ICache
from storefront.domains.cart.application.dto import CartItemDTO
from storefront.domains.cart.application.ports import ICartRepository
from storefront.domains.cart.application.services import CartCacheInvalidator
from storefront.domains.cart.domain.exceptions import (
    InvalidQuantityException,
    VariantNotFoundException,
    VariantUnavailableException,
)

logger = logging.getLogger(__name__)


@dataclass
class AddItemRequest:
    """Request for adding a variant to a cart."""

    cart_id: str
    variant_id: str
    quantity: int


class AddItemToCartUseCase:
    """
    Use Case: Add Item To Cart

    Validates quantity and variant availability, snapshots the sale price (or
    the list price when there is no sale) and delegates the add-or-merge to
    the repository. Nothing is written when a check fails.
    """

    def __init__(self, cart_repository: ICartRepository, cache: ICache):
        self.cart_repository = cart_repository
        self.invalidator = CartCacheInvalidator(cache)

    async def execute(self, request: AddItemRequest) -> CartItemDTO:
        quantity = request.quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidQuantityException(quantity)

        variant = await self.cart_repository.get_variant_info(request.variant_id)
        if variant is None:
            raise VariantNotFoundException(request.variant_id)

        if not variant.is_available:
            raise VariantUnavailableException(request.variant_id, variant.product_status)

        item = await self.cart_repository.add_or_update_item(
            cart_id=request.cart_id,
            variant_id=request.variant_id,
            quantity=quantity,
            price_snapshot=variant.effective_price,
        )
        await self.invalidator.after_item_change(request.cart_id)

        logger.debug(f"Added {quantity} x variant {request.variant_id} to cart {request.cart_id}")
        return CartItemDTO.from_entity(item)
