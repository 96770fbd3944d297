"""
Product status as seen by the cart.

The catalog owns the status; the cart only needs to know whether a variant
can currently be sold.
"""

from storefront.core.domain import StatusEnum


class ProductStatus(StatusEnum):
    """Publication status of the product a variant belongs to."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"

    @classmethod
    def is_available(cls, status: "str | ProductStatus | None") -> bool:
        """True only for PUBLISHED, matched exactly; anything else is not sellable."""
        if isinstance(status, ProductStatus):
            return status is cls.PUBLISHED
        return status == cls.PUBLISHED.value
