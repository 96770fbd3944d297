"""
Get Cart Details Use Case

Read path for a cart: lines plus a validation report against live variant
data, served through the cache when the cart has no fatal issues.
"""

import logging

from storefront.core.interfaces.cache import ICache
from storefront.domains.cart.application.dto import (
    CartDTO,
    CartItemDTO,
    CartValidationDTO,
    CartWithItemsDTO,
)
from storefront.domains.cart.application.ports import ICartRepository
from storefront.domains.cart.application.services import DEFAULT_CART_CACHE_TTL, CartCacheKeys
from storefront.domains.cart.domain.services import CartValidationService

logger = logging.getLogger(__name__)


class GetCartDetailsUseCase:
    """
    Use Case: Get Cart Details

    Caching policy: the assembled view is cached only when the errors bucket
    is empty. Price warnings alone do not block caching.
    """

    def __init__(
        self,
        cart_repository: ICartRepository,
        cache: ICache,
        validation_service: CartValidationService | None = None,
        cache_ttl: int = DEFAULT_CART_CACHE_TTL,
    ):
        """
        Initialize use case with dependencies.

        Args:
            cart_repository: Repository for cart data access
            cache: Cache for assembled cart views
            validation_service: Line validation rules (default thresholds if None)
            cache_ttl: TTL in seconds for cached views
        """
        self.cart_repository = cart_repository
        self.cache = cache
        self.validation_service = validation_service or CartValidationService()
        self.cache_ttl = cache_ttl

    async def execute(self, cart_id: str) -> CartWithItemsDTO | None:
        cache_key = CartCacheKeys.cart(cart_id)
        cached = await self.cache.get(cache_key)
        if cached:
            return CartWithItemsDTO.from_dict(cached)

        data = await self.cart_repository.get_cart_with_items(cart_id=cart_id)
        if data is None:
            return None

        validation = self.validation_service.validate((entry.item, entry.variant) for entry in data.items)

        base = CartDTO.from_entity(data.cart)
        dto = CartWithItemsDTO(
            id=base.id,
            user_id=base.user_id,
            session_id=base.session_id,
            created_at=base.created_at,
            updated_at=base.updated_at,
            items=[CartItemDTO.from_entity(entry.item) for entry in data.items],
            validation=CartValidationDTO.from_domain(validation) if validation else None,
        )

        if validation is None or not validation.has_errors:
            await self.cache.set(cache_key, dto.to_dict(), ttl=self.cache_ttl)
        else:
            logger.debug(f"Cart {cart_id} has {len(validation.errors)} invalid items, not caching")

        return dto
