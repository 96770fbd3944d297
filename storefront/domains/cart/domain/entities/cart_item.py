"""
CartItem Entity

One line of a cart: a variant reference, a quantity and the price snapshot
captured when the variant was added.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from storefront.core.domain import Entity, generate_uuid_str

from ..exceptions import InvalidPriceException, InvalidQuantityException
from ..value_objects.price import to_decimal


@dataclass(eq=False)
class CartItem(Entity[str]):
    """
    Cart line item.

    Invariants:
    - quantity is a strictly positive int while the item exists
      (a request for zero is a deletion, handled by the use case)
    - price_at_add is never negative

    The snapshot is never re-derived from the catalog here.
    """

    cart_id: str = ""
    variant_id: str = ""
    quantity: int = 1
    price_at_add: Decimal = field(default_factory=lambda: Decimal("0"))

    def __post_init__(self) -> None:
        self._ensure_positive_quantity(self.quantity)
        self.price_at_add = self._ensure_valid_price(self.price_at_add)

    @classmethod
    def create(
        cls,
        cart_id: str,
        variant_id: str,
        quantity: int,
        price_at_add: int | float | str | Decimal,
        id: str | None = None,
        created_at: datetime | None = None,
    ) -> "CartItem":
        """Factory method; raises InvalidQuantityException / InvalidPriceException."""
        return cls(
            id=id or generate_uuid_str(),
            cart_id=cart_id,
            variant_id=variant_id,
            quantity=quantity,
            price_at_add=price_at_add,  # type: ignore[arg-type]
            created_at=created_at or datetime.now(UTC),
        )

    # ==================== Invariants ====================

    @staticmethod
    def _ensure_positive_quantity(quantity: Any) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidQuantityException(quantity, "Quantity must be an integer")
        if quantity <= 0:
            raise InvalidQuantityException(quantity)

    @staticmethod
    def _ensure_valid_price(price: Any) -> Decimal:
        amount = to_decimal(price)
        if amount < 0:
            raise InvalidPriceException(amount)
        return amount

    # ==================== Behaviour ====================

    def increase_quantity(self, amount: int) -> None:
        """Add `amount` (may be negative); fails if the result is not positive."""
        next_quantity = self.quantity + amount
        self._ensure_positive_quantity(next_quantity)
        self.quantity = next_quantity

    def set_quantity(self, quantity: int) -> None:
        self._ensure_positive_quantity(quantity)
        self.quantity = quantity

    def update_price_snapshot(self, price: int | float | str | Decimal) -> None:
        self.price_at_add = self._ensure_valid_price(price)

    def absorb(self, other: "CartItem") -> None:
        """
        Merge another line for the same variant into this one.

        Quantity is additive and the price snapshot is last-write-wins. Both
        values are validated before either field changes.
        """
        next_quantity = self.quantity + other.quantity
        self._ensure_positive_quantity(next_quantity)
        next_price = self._ensure_valid_price(other.price_at_add)
        self.quantity = next_quantity
        self.price_at_add = next_price

    @property
    def price_snapshot(self) -> Decimal:
        return self.price_at_add

    @property
    def subtotal(self) -> Decimal:
        return self.price_at_add * self.quantity

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "cart_id": self.cart_id,
            "variant_id": self.variant_id,
            "quantity": self.quantity,
            "price_at_add": str(self.price_at_add),
            "created_at": self.created_at.isoformat(),
        }
