"""
Update Cart Item Use Case

Sets the quantity of a cart line. A quantity of zero removes the line.
"""

import logging
from dataclasses import dataclass

from storefront.core.interfaces.cache import ICache
from storefront.domains.cart.application.dto import CartItemDTO
from storefront.domains.cart.application.ports import ICartRepository
from storefront.domains.cart.application.services import CartCacheInvalidator
from storefront.domains.cart.domain.exceptions import (
    CartItemNotFoundException,
    InsufficientStockException,
    InvalidQuantityException,
    VariantUnavailableException,
)

logger = logging.getLogger(__name__)


@dataclass
class UpdateCartItemRequest:
    """Request for changing the quantity of a cart line."""

    item_id: str
    quantity: int


class UpdateCartItemUseCase:
    """
    Use Case: Update Cart Item

    Order of checks (all before any write):
    1. quantity >= 0
    2. the line exists
    3. quantity == 0 -> remove the line and return None
    4. the variant is available
    5. quantity <= live stock
    """

    def __init__(self, cart_repository: ICartRepository, cache: ICache):
        self.cart_repository = cart_repository
        self.invalidator = CartCacheInvalidator(cache)

    async def execute(self, request: UpdateCartItemRequest) -> CartItemDTO | None:
        quantity = request.quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidQuantityException(quantity, "Quantity must be an integer")
        if quantity < 0:
            raise InvalidQuantityException(quantity, "Quantity must be zero or greater")

        existing = await self.cart_repository.get_cart_item_with_variant(request.item_id)
        if existing is None:
            raise CartItemNotFoundException(request.item_id)

        if quantity == 0:
            await self.cart_repository.remove_item(request.item_id)
            await self.invalidator.after_item_change(existing.item.cart_id)
            logger.debug(f"Removed cart item {request.item_id} (quantity set to 0)")
            return None

        variant = existing.variant
        if not variant.is_available:
            raise VariantUnavailableException(variant.id, variant.product_status)

        if quantity > variant.stock_quantity:
            raise InsufficientStockException(variant.id, requested=quantity, available=variant.stock_quantity)

        updated = await self.cart_repository.update_item_quantity(request.item_id, quantity)
        await self.invalidator.after_item_change(updated.cart_id)
        return CartItemDTO.from_entity(updated)
