"""
Cart Aggregate Root

A shopping cart owned by exactly one identity (user or guest session) and the
line items it holds, at most one per variant.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from storefront.core.domain import AggregateRoot, generate_uuid_str

from ..events import CartItemAdded, CartReassigned
from ..exceptions import InvalidCartOwnerException
from ..value_objects.cart_owner import CartOwner, GuestOwner, UserOwner, owner_from_identity
from .cart_item import CartItem


@dataclass(eq=False)
class Cart(AggregateRoot[str]):
    """
    Cart aggregate root.

    `updated_at` belongs to the persistence layer; nothing in this class
    touches it.

    Example:
        ```python
        cart = Cart.create(id="c1", user_id=None, session_id="s1")
        cart.add_item(CartItem.create(cart_id="c1", variant_id="v1", quantity=2, price_at_add=1000))
        cart.assign_to_user("u1")
        cart.session_id  # None
        ```
    """

    owner: CartOwner | None = None
    items: list[CartItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.owner, (UserOwner, GuestOwner)):
            raise InvalidCartOwnerException()

    @classmethod
    def create(
        cls,
        id: str | None,
        user_id: str | None,
        session_id: str | None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        items: list[CartItem] | None = None,
    ) -> "Cart":
        """Factory method; raises InvalidCartOwnerException when both ids are missing."""
        now = datetime.now(UTC)
        return cls(
            id=id or generate_uuid_str(),
            owner=owner_from_identity(user_id, session_id),
            created_at=created_at or now,
            updated_at=updated_at or now,
            items=list(items or []),
        )

    # ==================== Ownership ====================

    @property
    def user_id(self) -> str | None:
        return self.owner.user_id if isinstance(self.owner, UserOwner) else None

    @property
    def session_id(self) -> str | None:
        return self.owner.session_id if isinstance(self.owner, GuestOwner) else None

    def is_guest(self) -> bool:
        return isinstance(self.owner, GuestOwner)

    def assign_to_user(self, user_id: str) -> None:
        """Hand the cart to a user; clears the session. Raises InvalidUserException."""
        self.owner = UserOwner(user_id=user_id)
        self._record_event(CartReassigned(cart_id=str(self.id), user_id=user_id))

    def assign_to_session(self, session_id: str) -> None:
        """Hand the cart to a guest session; clears the user. Raises InvalidSessionException."""
        self.owner = GuestOwner(session_id=session_id)
        self._record_event(CartReassigned(cart_id=str(self.id), session_id=session_id))

    # ==================== Items ====================

    def find_item(self, variant_id: str) -> CartItem | None:
        return next((item for item in self.items if item.variant_id == variant_id), None)

    def add_item(self, item: CartItem) -> None:
        """
        Add a line or merge it into the existing line for the same variant.

        Merging adds the quantities and takes the incoming price snapshot.
        """
        existing = self.find_item(item.variant_id)
        if existing is None:
            self.items.append(item)
        else:
            existing.absorb(item)

        self._record_event(
            CartItemAdded(
                cart_id=str(self.id),
                variant_id=item.variant_id,
                quantity=item.quantity,
                merged=existing is not None,
            )
        )

    def replace_items(self, items: list[CartItem]) -> None:
        """Replace the whole collection (used when loading from storage)."""
        self.items = list(items)

    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def subtotal(self) -> Decimal:
        return sum((item.subtotal for item in self.items), Decimal("0"))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "session_id": self.session_id,
            "items": [item.to_dict() for item in self.items],
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
