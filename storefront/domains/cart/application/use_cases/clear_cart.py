"""
Clear Cart Use Cases

Remove every line of a cart, either by cart id or by the identity that owns
it (used once an order has been placed).
"""

import logging
from dataclasses import dataclass

from storefront.core.interfaces.cache import ICache
from storefront.domains.cart.application.ports import ICartRepository
from storefront.domains.cart.application.services import CartCacheInvalidator
from storefront.domains.cart.domain.exceptions import CartIdentifierRequiredException

logger = logging.getLogger(__name__)


@dataclass
class ClearCartByIdentityRequest:
    """Request for clearing the cart of a user or guest session."""

    user_id: str | None = None
    session_id: str | None = None


class ClearCartUseCase:
    """Unconditionally deletes all lines of a cart."""

    def __init__(self, cart_repository: ICartRepository, cache: ICache):
        self.cart_repository = cart_repository
        self.invalidator = CartCacheInvalidator(cache)

    async def execute(self, cart_id: str) -> None:
        await self.cart_repository.clear_cart(cart_id)
        await self.invalidator.after_cart_cleared(cart_id)
        logger.info(f"Cleared cart {cart_id}")


class ClearCartAfterOrderUseCase:
    """
    Use Case: Clear Cart After Order

    Resolves the cart by user id first, then by session id. Does nothing when
    the identity has no cart.
    """

    def __init__(self, cart_repository: ICartRepository, cache: ICache):
        self.cart_repository = cart_repository
        self.invalidator = CartCacheInvalidator(cache)

    async def execute(self, request: ClearCartByIdentityRequest) -> None:
        if not request.user_id and not request.session_id:
            raise CartIdentifierRequiredException()

        cart = None
        if request.user_id:
            cart = await self.cart_repository.find_by_user_id(request.user_id)
        if cart is None and request.session_id:
            cart = await self.cart_repository.find_by_session_id(request.session_id)

        if cart is None:
            logger.debug("No cart to clear after order")
            return

        await self.cart_repository.clear_cart(str(cart.id))
        await self.invalidator.after_cart_cleared(str(cart.id))
        logger.info(f"Cleared cart {cart.id} after order")
