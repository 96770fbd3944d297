"""
Cart Domain Container.

Single Responsibility: Wire all cart domain dependencies.
"""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domains.cart.application.use_cases import (
    AddItemToCartUseCase,
    ClearCartAfterOrderUseCase,
    ClearCartUseCase,
    GetCartDetailsUseCase,
    GetOrCreateCartUseCase,
    RemoveCartItemUseCase,
    UpdateCartItemUseCase,
)
from storefront.domains.cart.domain.services import CartValidationService
from storefront.domains.cart.infrastructure.repositories import SQLAlchemyCartRepository

if TYPE_CHECKING:
    from storefront.core.container.base import BaseContainer

logger = logging.getLogger(__name__)


class CartContainer:
    """
    Cart domain container.

    Repositories and use cases are created per database session.
    """

    def __init__(self, base: "BaseContainer"):
        self._base = base

    # ==================== REPOSITORIES ====================

    def create_cart_repository(self, db: AsyncSession) -> SQLAlchemyCartRepository:
        """Create Cart Repository."""
        return SQLAlchemyCartRepository(session=db)

    # ==================== SERVICES ====================

    def create_cart_validation_service(self) -> CartValidationService:
        return CartValidationService.from_settings(self._base.settings)

    # ==================== USE CASES ====================

    def create_get_or_create_cart_use_case(self, db: AsyncSession) -> GetOrCreateCartUseCase:
        return GetOrCreateCartUseCase(
            cart_repository=self.create_cart_repository(db),
            cache=self._base.get_cache(),
            cache_ttl=self._base.settings.CART_CACHE_TTL_SECONDS,
        )

    def create_add_item_to_cart_use_case(self, db: AsyncSession) -> AddItemToCartUseCase:
        return AddItemToCartUseCase(cart_repository=self.create_cart_repository(db), cache=self._base.get_cache())

    def create_update_cart_item_use_case(self, db: AsyncSession) -> UpdateCartItemUseCase:
        return UpdateCartItemUseCase(cart_repository=self.create_cart_repository(db), cache=self._base.get_cache())

    def create_remove_cart_item_use_case(self, db: AsyncSession) -> RemoveCartItemUseCase:
        return RemoveCartItemUseCase(cart_repository=self.create_cart_repository(db), cache=self._base.get_cache())

    def create_clear_cart_use_case(self, db: AsyncSession) -> ClearCartUseCase:
        return ClearCartUseCase(cart_repository=self.create_cart_repository(db), cache=self._base.get_cache())

    def create_clear_cart_after_order_use_case(self, db: AsyncSession) -> ClearCartAfterOrderUseCase:
        return ClearCartAfterOrderUseCase(
            cart_repository=self.create_cart_repository(db),
            cache=self._base.get_cache(),
        )

    def create_get_cart_details_use_case(self, db: AsyncSession) -> GetCartDetailsUseCase:
        return GetCartDetailsUseCase(
            cart_repository=self.create_cart_repository(db),
            cache=self._base.get_cache(),
            validation_service=self.create_cart_validation_service(),
            cache_ttl=self._base.settings.CART_CACHE_TTL_SECONDS,
        )
