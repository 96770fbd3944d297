"""
Cart Domain Events

Recorded by the Cart aggregate as it changes.
"""

from dataclasses import dataclass

from storefront.core.domain import DomainEvent


@dataclass(frozen=True)
class CartItemAdded(DomainEvent):
    cart_id: str = ""
    variant_id: str = ""
    quantity: int = 0
    merged: bool = False


@dataclass(frozen=True)
class CartReassigned(DomainEvent):
    """Ownership moved between a session and a user."""

    cart_id: str = ""
    user_id: str | None = None
    session_id: str | None = None
