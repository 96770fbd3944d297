"""
Cart Domain Exceptions

Typed failures raised by the cart aggregate and the cart use cases.
Every exception carries a stable code so callers can map it to a transport
status without inspecting messages.
"""

from typing import Any

from storefront.core.domain import (
    BusinessRuleViolationException,
    DomainException,
    EntityNotFoundException,
    InsufficientStockException,
    ValidationException,
)


class InvalidCartOwnerException(ValidationException):
    """Raised when a cart would have neither a user nor a session owner."""

    def __init__(self, message: str = "Cart must have either userId or sessionId"):
        super().__init__(message, field="owner", code="INVALID_CART_OWNER")


class InvalidUserException(ValidationException):
    """Raised when reassigning a cart to an empty user id."""

    def __init__(self, message: str = "User ID must be provided"):
        super().__init__(message, field="user_id", code="INVALID_USER")


class InvalidSessionException(ValidationException):
    """Raised when reassigning a cart to an empty session id."""

    def __init__(self, message: str = "Session ID must be provided"):
        super().__init__(message, field="session_id", code="INVALID_SESSION")


class InvalidQuantityException(ValidationException):
    """Raised when a quantity violates the line item rules."""

    def __init__(self, quantity: Any, message: str = "Quantity must be greater than 0"):
        self.quantity = quantity
        super().__init__(
            message,
            field="quantity",
            details={"quantity": quantity},
            code="INVALID_QUANTITY",
        )


class InvalidPriceException(ValidationException):
    """Raised when a price or price snapshot is negative."""

    def __init__(self, price: Any, message: str = "Price must be non-negative"):
        self.price = price
        super().__init__(
            message,
            field="price",
            details={"price": str(price)},
            code="INVALID_PRICE",
        )


class InvalidSlugException(ValidationException):
    """Raised when a slug contains characters outside [a-z0-9-_]."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            "Slug must contain only lowercase letters, numbers, hyphens, and underscores",
            field="slug",
            details={"value": value},
            code="INVALID_SLUG",
        )


class CartIdentifierRequiredException(DomainException):
    """Raised when a cart lookup has neither a user id nor a session id."""

    def __init__(self):
        super().__init__(
            "Either userId or sessionId must be provided",
            "CART_IDENTIFIER_REQUIRED",
        )


class VariantNotFoundException(EntityNotFoundException):
    """Raised when the referenced product variant does not exist."""

    def __init__(self, variant_id: str):
        super().__init__(
            "ProductVariant",
            variant_id,
            message="Product variant not found",
            code="VARIANT_NOT_FOUND",
        )


class CartItemNotFoundException(EntityNotFoundException):
    """Raised when the referenced cart line item does not exist."""

    def __init__(self, item_id: str):
        super().__init__(
            "CartItem",
            item_id,
            message="Cart item not found",
            code="CART_ITEM_NOT_FOUND",
        )


class VariantUnavailableException(BusinessRuleViolationException):
    """Raised when the variant's product is not published for sale."""

    def __init__(self, variant_id: str, product_status: str):
        self.variant_id = variant_id
        self.product_status = product_status
        super().__init__(
            "variant_must_be_available",
            message=f"Product is not available (status: {product_status})",
            details={"variant_id": variant_id, "product_status": product_status},
            code="VARIANT_UNAVAILABLE",
        )


__all__ = [
    "InvalidCartOwnerException",
    "InvalidUserException",
    "InvalidSessionException",
    "InvalidQuantityException",
    "InvalidPriceException",
    "InvalidSlugException",
    "CartIdentifierRequiredException",
    "VariantNotFoundException",
    "CartItemNotFoundException",
    "VariantUnavailableException",
    "InsufficientStockException",
]
