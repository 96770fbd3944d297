"""
Price Value Object for the Cart Domain

Immutable, non-negative decimal amount used for variant prices and the
price snapshots stored on cart line items.
"""

from dataclasses import dataclass
from decimal import Decimal

from storefront.core.domain import ValueObject

from ..exceptions import InvalidPriceException

DEFAULT_RELATIVE_DRIFT = Decimal("0.01")
DEFAULT_ABSOLUTE_DRIFT = Decimal("1000")


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """Convert numbers coming from the catalog or the database into Decimal."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Price(ValueObject):
    """
    Price value object.

    Example:
        ```python
        snapshot = Price.from_number(1999)
        live = Price.from_number(2499)
        snapshot.has_significant_difference(live)  # True, 500 > 1% of 1999
        ```
    """

    amount: Decimal

    def _validate(self) -> None:
        """Validate price constraints."""
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", to_decimal(self.amount))
        if self.amount < 0:
            raise InvalidPriceException(self.amount, "Price cannot be negative")

    @classmethod
    def from_number(cls, value: int | float | str | Decimal) -> "Price":
        return cls(amount=to_decimal(value))

    @classmethod
    def zero(cls) -> "Price":
        """Create a zero price."""
        return cls(amount=Decimal("0"))

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_greater_than(self, other: "Price") -> bool:
        return self.amount > other.amount

    def is_less_than(self, other: "Price") -> bool:
        return self.amount < other.amount

    def min(self, other: "Price") -> "Price":
        """Return the lower of the two prices (self on ties)."""
        return other if other.is_less_than(self) else self

    def percentage_difference(self, other: "Price") -> Decimal:
        """Absolute difference relative to this price, in percent."""
        if self.amount == 0:
            return Decimal("0")
        return abs((self.amount - other.amount) / self.amount) * 100

    def has_significant_difference(
        self,
        other: "Price",
        relative: Decimal = DEFAULT_RELATIVE_DRIFT,
        absolute: Decimal = DEFAULT_ABSOLUTE_DRIFT,
    ) -> bool:
        """
        Check whether `other` drifted away from this price.

        Either condition alone is enough: the difference exceeds `relative`
        times this price, or it exceeds `absolute` units.
        """
        diff = abs(self.amount - other.amount)
        return diff > relative * self.amount or diff > absolute

    def __str__(self) -> str:
        if self.amount == self.amount.to_integral_value():
            return f"{int(self.amount):,}"
        return f"{self.amount.normalize():,}"
