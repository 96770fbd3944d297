"""
Cart Use Cases

Each use case represents a single cart operation and exposes `execute`.
"""

from .add_item_to_cart import AddItemRequest, AddItemToCartUseCase
from .clear_cart import (
    ClearCartAfterOrderUseCase,
    ClearCartByIdentityRequest,
    ClearCartUseCase,
)
from .get_cart_details import GetCartDetailsUseCase
from .get_or_create_cart import GetOrCreateCartRequest, GetOrCreateCartUseCase
from .remove_cart_item import RemoveCartItemUseCase
from .update_cart_item import UpdateCartItemRequest, UpdateCartItemUseCase

__all__ = [
    # Resolution
    "GetOrCreateCartUseCase",
    "GetOrCreateCartRequest",
    # Mutations
    "AddItemToCartUseCase",
    "AddItemRequest",
    "UpdateCartItemUseCase",
    "UpdateCartItemRequest",
    "RemoveCartItemUseCase",
    "ClearCartUseCase",
    "ClearCartAfterOrderUseCase",
    "ClearCartByIdentityRequest",
    # Read
    "GetCartDetailsUseCase",
]
