"""
Cart cache keys and post-write invalidation.

The cache is advisory: the repository is the source of truth and every path
stays correct with the cache unavailable.
"""

import logging

from storefront.core.interfaces.cache import ICache

logger = logging.getLogger(__name__)

DEFAULT_CART_CACHE_TTL = 300


class CartCacheKeys:
    """Builds the cache keys used for carts."""

    PREFIX = "cart"

    @classmethod
    def cart(cls, cart_id: str) -> str:
        return f"{cls.PREFIX}:{cart_id}"

    @classmethod
    def user(cls, user_id: str) -> str:
        return f"{cls.PREFIX}:userId:{user_id}"

    @classmethod
    def session(cls, session_id: str) -> str:
        return f"{cls.PREFIX}:sessionId:{session_id}"

    @classmethod
    def identity(cls, user_id: str | None = None, session_id: str | None = None) -> str:
        """Key for a single-identity lookup; the user id wins when both are given."""
        if user_id:
            return cls.user(user_id)
        if session_id:
            return cls.session(session_id)
        raise ValueError("user_id or session_id is required")


class CartCacheInvalidator:
    """
    Post-commit hook that drops stale cart entries.

    Call the `after_*` methods only once the repository write has returned.
    Cache failures are logged and never propagated.
    """

    def __init__(self, cache: ICache):
        self.cache = cache

    async def after_item_change(self, cart_id: str) -> None:
        """A line was added, updated or removed."""
        await self._delete([CartCacheKeys.cart(cart_id)])

    async def after_cart_cleared(self, cart_id: str) -> None:
        await self._delete([CartCacheKeys.cart(cart_id)])

    async def after_merge(self, user_id: str, session_id: str, cart_id: str | None = None) -> None:
        """
        Guest cart merged into (or reassigned to) a user.

        Both identity lookups are dropped since the guest cart id may no
        longer exist; the surviving cart's detail entry is dropped as well.
        """
        keys = [CartCacheKeys.user(user_id), CartCacheKeys.session(session_id)]
        if cart_id:
            keys.append(CartCacheKeys.cart(cart_id))
        await self._delete(keys)

    async def _delete(self, keys: list[str]) -> None:
        try:
            if len(keys) == 1:
                await self.cache.delete(keys[0])
            else:
                await self.cache.delete_many(keys)
        except Exception as e:
            logger.warning(f"Cart cache invalidation failed for {keys}: {e}")
