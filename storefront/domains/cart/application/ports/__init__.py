"""
Cart Application Ports

Interface definitions (ports) for the Cart domain.
Uses Protocol for structural typing.
"""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from storefront.domains.cart.domain.entities import Cart, CartItem
from storefront.domains.cart.domain.value_objects import VariantSnapshot


@dataclass
class CartItemWithVariant:
    """A cart line together with the live data of its variant."""

    item: CartItem
    variant: VariantSnapshot


@dataclass
class CartWithItems:
    """A cart and its lines, each paired with live variant data."""

    cart: Cart
    items: list[CartItemWithVariant] = field(default_factory=list)


@runtime_checkable
class ICartRepository(Protocol):
    """
    Interface for cart repository.

    The repository is the single source of truth for carts. Mutating methods
    commit before returning, so callers may treat a return as a completed write.
    """

    async def find_by_id(self, cart_id: str) -> Cart | None:
        """Get cart by ID"""
        ...

    async def find_by_user_id(self, user_id: str) -> Cart | None:
        """Get the cart owned by a user"""
        ...

    async def find_by_session_id(self, session_id: str) -> Cart | None:
        """Get the cart owned by a guest session"""
        ...

    async def create_cart(self, user_id: str | None = None, session_id: str | None = None) -> Cart:
        """Create an empty cart for exactly one identity"""
        ...

    async def merge_guest_cart(self, user_id: str, session_id: str) -> Cart:
        """
        Reconcile the session's cart into the user's cart.

        - no guest cart, or an empty one: return the user's cart (created if absent)
        - no user cart: reassign the guest cart to the user
        - both: add guest lines to the user cart, keeping the lower price
          snapshot on overlapping variants, then delete the guest cart
        """
        ...

    async def get_cart_with_items(
        self,
        cart_id: str | None = None,
        user_id: str | None = None,
        session_id: str | None = None,
    ) -> CartWithItems | None:
        """Load a cart by one identity, with each line's variant snapshot"""
        ...

    async def add_or_update_item(
        self,
        cart_id: str,
        variant_id: str,
        quantity: int,
        price_snapshot: object,
    ) -> CartItem:
        """Atomic add-or-merge: additive quantity, overwritten price snapshot"""
        ...

    async def update_item_quantity(self, item_id: str, quantity: int) -> CartItem:
        """Set the quantity of an existing line"""
        ...

    async def remove_item(self, item_id: str) -> None:
        """Delete one line"""
        ...

    async def clear_cart(self, cart_id: str) -> None:
        """Delete every line of a cart"""
        ...

    async def delete_cart(self, cart_id: str) -> None:
        """Delete a cart and its lines"""
        ...

    async def get_variant_info(self, variant_id: str) -> VariantSnapshot | None:
        """Get live stock, price and status for a variant"""
        ...

    async def get_cart_item_with_variant(self, item_id: str) -> CartItemWithVariant | None:
        """Get a line with the live data of its variant"""
        ...


__all__ = [
    "ICartRepository",
    "CartItemWithVariant",
    "CartWithItems",
    "VariantSnapshot",
]
