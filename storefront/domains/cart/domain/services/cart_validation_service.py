"""
Cart Validation Service

Domain service that reconciles the lines of a stored cart against live
variant data (publication status, stock and price).
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from ..entities.cart_item import CartItem
from ..value_objects.price import DEFAULT_ABSOLUTE_DRIFT, DEFAULT_RELATIVE_DRIFT, Price, to_decimal
from ..value_objects.variant_snapshot import VariantSnapshot


class IssueType(str, Enum):
    """Kinds of problem a cart line can have."""

    STATUS = "status"
    STOCK = "stock"
    PRICE = "price"

    @property
    def is_fatal(self) -> bool:
        return self in (IssueType.STATUS, IssueType.STOCK)


@dataclass(frozen=True)
class ValidationIssue:
    type: IssueType
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "message": self.message}


@dataclass
class CartItemValidation:
    """All issues found for one cart line."""

    item_id: str
    variant_id: str
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_fatal(self) -> bool:
        return any(issue.type.is_fatal for issue in self.issues)

    def to_dict(self) -> dict[str, Any]:
        return {
            "item_id": self.item_id,
            "variant_id": self.variant_id,
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass
class CartValidation:
    """Line validations split into non-blocking warnings and fatal errors."""

    warnings: list[CartItemValidation] = field(default_factory=list)
    errors: list[CartItemValidation] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "warnings": [w.to_dict() for w in self.warnings],
            "errors": [e.to_dict() for e in self.errors],
        }


class CartValidationService:
    """
    Domain service for cart read-path validation.

    Rules per line:
    - status: the variant's product is not PUBLISHED
    - stock: line quantity is strictly greater than live stock
    - price: live price drifted from the snapshot by more than the relative
      threshold of the snapshot, or by more than the absolute threshold.
      Only checked when the snapshot is positive.

    A line with any status or stock issue lands in `errors`; a line with only
    price issues lands in `warnings`.

    Example:
        ```python
        service = CartValidationService()
        validation = service.validate([(item, variant)])
        if validation and validation.has_errors:
            ...
        ```
    """

    def __init__(
        self,
        relative_drift: Decimal | float = DEFAULT_RELATIVE_DRIFT,
        absolute_drift: Decimal | float = DEFAULT_ABSOLUTE_DRIFT,
    ):
        """
        Initialize validation service.

        Args:
            relative_drift: Fraction of the snapshot price (0.01 = 1%)
            absolute_drift: Absolute price difference in currency units
        """
        self.relative_drift = to_decimal(relative_drift)
        self.absolute_drift = to_decimal(absolute_drift)

    @classmethod
    def from_settings(cls, settings: Any) -> "CartValidationService":
        """Build the service from CART_PRICE_DRIFT_* settings (percent + absolute)."""
        return cls(
            relative_drift=to_decimal(settings.CART_PRICE_DRIFT_PERCENT) / 100,
            absolute_drift=settings.CART_PRICE_DRIFT_ABSOLUTE,
        )

    def check_item(self, item: CartItem, variant: VariantSnapshot) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []

        if not variant.is_available:
            issues.append(
                ValidationIssue(
                    type=IssueType.STATUS,
                    message=f"Product is not available (status: {variant.product_status})",
                )
            )

        if item.quantity > variant.stock_quantity:
            issues.append(
                ValidationIssue(
                    type=IssueType.STOCK,
                    message=(
                        f"Insufficient stock. Only {variant.stock_quantity} items available, "
                        f"but cart has {item.quantity}."
                    ),
                )
            )

        snapshot = Price(amount=item.price_snapshot)
        current = variant.effective_price_value()
        if not snapshot.is_zero() and snapshot.has_significant_difference(
            current, relative=self.relative_drift, absolute=self.absolute_drift
        ):
            issues.append(
                ValidationIssue(
                    type=IssueType.PRICE,
                    message=f"Price has changed from {snapshot} to {current}",
                )
            )

        return issues

    def validate(self, lines: Iterable[tuple[CartItem, VariantSnapshot]]) -> CartValidation | None:
        """
        Validate every (item, variant) pair.

        Returns:
            CartValidation, or None when no line has any issue
        """
        validation = CartValidation()

        for item, variant in lines:
            issues = self.check_item(item, variant)
            if not issues:
                continue

            item_validation = CartItemValidation(
                item_id=str(item.id),
                variant_id=item.variant_id,
                issues=issues,
            )
            if item_validation.is_fatal:
                validation.errors.append(item_validation)
            else:
                validation.warnings.append(item_validation)

        if not validation.warnings and not validation.errors:
            return None

        return validation
