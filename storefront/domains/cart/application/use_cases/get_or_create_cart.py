"""
Get Or Create Cart Use Case

Maps an identity (user id and/or guest session id) to exactly one cart.
"""

import logging
from dataclasses import dataclass

from storefront.core.interfaces.cache import ICache
from storefront.domains.cart.application.dto import CartDTO
from storefront.domains.cart.application.ports import ICartRepository
from storefront.domains.cart.application.services import (
    DEFAULT_CART_CACHE_TTL,
    CartCacheInvalidator,
    CartCacheKeys,
)
from storefront.domains.cart.domain.entities import Cart
from storefront.domains.cart.domain.exceptions import CartIdentifierRequiredException

logger = logging.getLogger(__name__)


@dataclass
class GetOrCreateCartRequest:
    """Request for resolving a cart."""

    user_id: str | None = None
    session_id: str | None = None


class GetOrCreateCartUseCase:
    """
    Use Case: Get Or Create Cart

    - user id and session id: merge the guest cart into the user's cart.
      Never served from cache; both identity keys are invalidated and the
      result is cached under the user key.
    - a single identity: read-through cache, creating the cart if absent.
    """

    def __init__(
        self,
        cart_repository: ICartRepository,
        cache: ICache,
        cache_ttl: int = DEFAULT_CART_CACHE_TTL,
    ):
        """
        Initialize use case with dependencies.

        Args:
            cart_repository: Repository for cart data access
            cache: Cache for identity -> cart lookups
            cache_ttl: TTL in seconds for cached lookups
        """
        self.cart_repository = cart_repository
        self.cache = cache
        self.invalidator = CartCacheInvalidator(cache)
        self.cache_ttl = cache_ttl

    async def execute(self, request: GetOrCreateCartRequest) -> CartDTO:
        user_id = request.user_id or None
        session_id = request.session_id or None

        if user_id is None and session_id is None:
            raise CartIdentifierRequiredException()

        if user_id and session_id:
            return await self._merge(user_id, session_id)

        cache_key = CartCacheKeys.identity(user_id=user_id, session_id=session_id)
        cached = await self.cache.get(cache_key)
        if cached:
            return CartDTO.from_dict(cached)

        cart = await self._find_or_create(user_id=user_id, session_id=session_id)
        dto = CartDTO.from_entity(cart)
        await self.cache.set(cache_key, dto.to_dict(), ttl=self.cache_ttl)
        return dto

    async def _merge(self, user_id: str, session_id: str) -> CartDTO:
        cart = await self.cart_repository.merge_guest_cart(user_id, session_id)
        logger.info(f"Resolved cart {cart.id} for user {user_id} (guest session {session_id})")

        dto = CartDTO.from_entity(cart)
        await self.invalidator.after_merge(user_id, session_id, dto.id)
        await self.cache.set(CartCacheKeys.user(user_id), dto.to_dict(), ttl=self.cache_ttl)
        return dto

    async def _find_or_create(self, user_id: str | None, session_id: str | None) -> Cart:
        if user_id:
            cart = await self.cart_repository.find_by_user_id(user_id)
        else:
            cart = await self.cart_repository.find_by_session_id(session_id)  # type: ignore[arg-type]

        if cart is None:
            cart = await self.cart_repository.create_cart(user_id=user_id, session_id=session_id)
            logger.info(f"Created cart {cart.id}")

        return cart
