"""
Remove Cart Item Use Case
"""

import logging

from storefront.core.interfaces.cache import ICache
from storefront.domains.cart.application.ports import ICartRepository
from storefront.domains.cart.application.services import CartCacheInvalidator
from storefront.domains.cart.domain.exceptions import CartItemNotFoundException

logger = logging.getLogger(__name__)


class RemoveCartItemUseCase:
    """Deletes one line and drops its cart's cached detail view."""

    def __init__(self, cart_repository: ICartRepository, cache: ICache):
        self.cart_repository = cart_repository
        self.invalidator = CartCacheInvalidator(cache)

    async def execute(self, item_id: str) -> None:
        # the cart id is needed for the cache key
        existing = await self.cart_repository.get_cart_item_with_variant(item_id)
        if existing is None:
            raise CartItemNotFoundException(item_id)

        await self.cart_repository.remove_item(item_id)
        await self.invalidator.after_item_change(existing.item.cart_id)
        logger.debug(f"Removed cart item {item_id} from cart {existing.item.cart_id}")
