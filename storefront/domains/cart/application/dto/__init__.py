"""
Cart Application DTOs

Data Transfer Objects for the Cart domain. DTOs are what the use cases
return and what the cache stores (as plain dicts via to_dict/from_dict).
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from storefront.domains.cart.domain.entities import Cart, CartItem
from storefront.domains.cart.domain.services import CartItemValidation, CartValidation


def _parse_datetime(value: datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


# ==================== Cart DTOs ====================


@dataclass
class CartDTO:
    """Cart data transfer object"""

    id: str
    user_id: str | None
    session_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, cart: Cart) -> "CartDTO":
        return cls(
            id=str(cart.id),
            user_id=cart.user_id,
            session_id=cart.session_id,
            created_at=cart.created_at,
            updated_at=cart.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "session_id": self.session_id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CartDTO":
        return cls(
            id=data["id"],
            user_id=data.get("user_id"),
            session_id=data.get("session_id"),
            created_at=_parse_datetime(data["created_at"]),
            updated_at=_parse_datetime(data["updated_at"]),
        )


@dataclass
class CartItemDTO:
    """Cart line data transfer object"""

    id: str
    cart_id: str
    variant_id: str
    quantity: int
    price_at_add: Decimal
    created_at: datetime

    @classmethod
    def from_entity(cls, item: CartItem) -> "CartItemDTO":
        return cls(
            id=str(item.id),
            cart_id=item.cart_id,
            variant_id=item.variant_id,
            quantity=item.quantity,
            price_at_add=item.price_snapshot,
            created_at=item.created_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "cart_id": self.cart_id,
            "variant_id": self.variant_id,
            "quantity": self.quantity,
            "price_at_add": str(self.price_at_add),
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CartItemDTO":
        return cls(
            id=data["id"],
            cart_id=data["cart_id"],
            variant_id=data["variant_id"],
            quantity=int(data["quantity"]),
            price_at_add=Decimal(str(data["price_at_add"])),
            created_at=_parse_datetime(data["created_at"]),
        )


# ==================== Validation DTOs ====================


@dataclass
class CartItemValidationDTO:
    """Issues of one cart line"""

    item_id: str
    variant_id: str
    issues: list[dict[str, str]] = field(default_factory=list)

    @classmethod
    def from_domain(cls, validation: CartItemValidation) -> "CartItemValidationDTO":
        return cls(
            item_id=validation.item_id,
            variant_id=validation.variant_id,
            issues=[issue.to_dict() for issue in validation.issues],
        )

    def to_dict(self) -> dict[str, Any]:
        return {"item_id": self.item_id, "variant_id": self.variant_id, "issues": list(self.issues)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CartItemValidationDTO":
        return cls(
            item_id=data["item_id"],
            variant_id=data["variant_id"],
            issues=[dict(i) for i in data.get("issues", [])],
        )


@dataclass
class CartValidationDTO:
    """Warnings (price drift) and errors (status/stock) of a cart"""

    warnings: list[CartItemValidationDTO] = field(default_factory=list)
    errors: list[CartItemValidationDTO] = field(default_factory=list)

    @classmethod
    def from_domain(cls, validation: CartValidation) -> "CartValidationDTO":
        return cls(
            warnings=[CartItemValidationDTO.from_domain(w) for w in validation.warnings],
            errors=[CartItemValidationDTO.from_domain(e) for e in validation.errors],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "warnings": [w.to_dict() for w in self.warnings],
            "errors": [e.to_dict() for e in self.errors],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CartValidationDTO":
        return cls(
            warnings=[CartItemValidationDTO.from_dict(w) for w in data.get("warnings", [])],
            errors=[CartItemValidationDTO.from_dict(e) for e in data.get("errors", [])],
        )


@dataclass
class CartWithItemsDTO(CartDTO):
    """Cart with its lines and, when anything is wrong, a validation report"""

    items: list[CartItemDTO] = field(default_factory=list)
    validation: CartValidationDTO | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["items"] = [item.to_dict() for item in self.items]
        if self.validation is not None:
            data["validation"] = self.validation.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CartWithItemsDTO":
        base = CartDTO.from_dict(data)
        validation = data.get("validation")
        return cls(
            id=base.id,
            user_id=base.user_id,
            session_id=base.session_id,
            created_at=base.created_at,
            updated_at=base.updated_at,
            items=[CartItemDTO.from_dict(i) for i in data.get("items", [])],
            validation=CartValidationDTO.from_dict(validation) if validation else None,
        )


__all__ = [
    "CartDTO",
    "CartItemDTO",
    "CartItemValidationDTO",
    "CartValidationDTO",
    "CartWithItemsDTO",
]
