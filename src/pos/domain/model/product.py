"""Product aggregate.

Products belong to the catalog service; the checkout only reads them.
A product carries the stock count that was current when it was fetched.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Invariants:
    - ``price`` is never negative
    - ``stock_quantity`` is a non-negative integer
    """

    id: int
    name: str
    price: Money
    stock_quantity: int
    sku: str = ""
    barcode: str = ""

    def __post_init__(self) -> None:
        if self.price.is_negative:
            raise ValidationError(
                f"Product price cannot be negative, got {self.price.amount}"
            )
        if not isinstance(self.stock_quantity, int) or self.stock_quantity < 0:
            raise ValidationError(
                f"Stock quantity for {self.name} must be a non-negative integer"
            )

    @property
    def in_stock(self) -> bool:
        return self.stock_quantity > 0
