"""
Base Container - Shared Singletons.

Single Responsibility: Manage shared resources (settings, cache).
"""

import logging

from storefront.config.settings import Settings, get_settings
from storefront.core.interfaces.cache import ICache
from storefront.repositories.async_redis_cache import AsyncRedisCache

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Base container for shared singletons.

    Single Responsibility: Create and cache shared resources.
    """

    def __init__(self, settings: Settings | None = None, cache: ICache | None = None):
        """
        Initialize base container.

        Args:
            settings: Optional settings (defaults to get_settings())
            cache: Optional cache instance (defaults to Redis)
        """
        self.settings = settings or get_settings()
        self._cache_instance: ICache | None = cache

        logger.info("BaseContainer initialized")

    def get_cache(self) -> ICache:
        """Get cache instance (singleton). Connects lazily on first use."""
        if self._cache_instance is None:
            logger.info(f"Creating AsyncRedisCache for {self.settings.REDIS_HOST}:{self.settings.REDIS_PORT}")
            self._cache_instance = AsyncRedisCache(settings=self.settings)
        return self._cache_instance
