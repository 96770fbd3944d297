"""
Dependency Injection Container.

Wires concrete implementations (SQLAlchemy, Redis) to the cart use cases.
"""

from __future__ import annotations

import logging

from storefront.config.settings import Settings
from storefront.core.interfaces.cache import ICache
from storefront.core.shared.logger import configure_logging

from .base import BaseContainer
from .cart import CartContainer

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container (Facade).

    Single Responsibility: Compose and delegate to domain-specific containers.
    """

    def __init__(self, settings: Settings | None = None, cache: ICache | None = None):
        self._base = BaseContainer(settings=settings, cache=cache)
        self.cart = CartContainer(self._base)

        logger.info("DependencyContainer initialized")

    @property
    def settings(self) -> Settings:
        return self._base.settings

    def get_cache(self) -> ICache:
        return self._base.get_cache()


_container: DependencyContainer | None = None


def get_container(settings: Settings | None = None, cache: ICache | None = None) -> DependencyContainer:
    """
    Get global container instance (singleton).

    The first call also installs logging from LOG_LEVEL / LOG_FORMAT.

    Args:
        settings: Optional settings (only used on first call)
        cache: Optional cache (only used on first call)

    Returns:
        DependencyContainer instance
    """
    global _container

    if _container is None:
        _container = DependencyContainer(settings=settings, cache=cache)
        configure_logging(_container.settings)
        logger.info("Created global DependencyContainer")

    return _container


def reset_container() -> None:
    """
    Reset global container instance.

    Useful for testing or reconfiguration.
    """
    global _container
    logger.info("Resetting global DependencyContainer")
    _container = None


__all__ = [
    "BaseContainer",
    "CartContainer",
    "DependencyContainer",
    "get_container",
    "reset_container",
]
