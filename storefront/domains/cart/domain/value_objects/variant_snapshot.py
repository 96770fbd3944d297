"""
Variant Snapshot

Point-in-time stock, price and status facts for a product variant, read from
the catalog. Never owned or cached by the cart aggregate.
"""

from dataclasses import dataclass
from decimal import Decimal

from storefront.core.domain import ValueObject

from .price import Price, to_decimal
from .product_status import ProductStatus


@dataclass(frozen=True)
class VariantSnapshot(ValueObject):
    id: str
    stock_quantity: int
    price: Decimal
    sale_price: Decimal | None = None
    product_status: str = ProductStatus.DRAFT.value

    def _validate(self) -> None:
        object.__setattr__(self, "price", to_decimal(self.price))
        if self.sale_price is not None:
            object.__setattr__(self, "sale_price", to_decimal(self.sale_price))
        if isinstance(self.product_status, ProductStatus):
            object.__setattr__(self, "product_status", self.product_status.value)

    @property
    def effective_price(self) -> Decimal:
        """Sale price when one is set, otherwise the list price."""
        return self.sale_price if self.sale_price is not None else self.price

    @property
    def is_available(self) -> bool:
        return ProductStatus.is_available(self.product_status)

    def effective_price_value(self) -> Price:
        return Price(amount=self.effective_price)
