"""Cart aggregate — the line items of one checkout.

The cart owns its lines and keeps them in insertion order, one line per
product.  Every quantity it holds is positive and within the stock count
of the product snapshot the line was created from.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import InsufficientStockError, OutOfStockError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    """A product snapshot plus how many units of it are being bought."""

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


class Cart:

    def __init__(self) -> None:
        self._lines: dict[int, CartLine] = {}

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product) -> CartLine:
        """Add one unit of *product*.

        Raises OutOfStockError when the product has no stock and
        InsufficientStockError when the cart already holds every unit.
        """
        if not product.in_stock:
            raise OutOfStockError(f"{product.name} is out of stock")

        existing = self._lines.get(product.id)
        if existing is None:
            line = CartLine(product=product, quantity=Quantity(1))
            self._lines[product.id] = line
            return line

        if existing.quantity.value >= product.stock_quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {product.name} "
                f"(only {product.stock_quantity} available)"
            )
        self.set_quantity(product.id, existing.quantity.value + 1)
        return existing

    def set_quantity(self, product_id: int, new_quantity: int) -> None:
        """Set a line's quantity, clamped to the product's stock.

        Zero or less removes the line.  Unknown products are ignored.
        """
        if new_quantity <= 0:
            self.remove_item(product_id)
            return

        line = self._lines.get(product_id)
        if line is None:
            return
        clamped = min(new_quantity, line.product.stock_quantity)
        line.quantity = Quantity(clamped)

    def remove_item(self, product_id: int) -> None:
        self._lines.pop(product_id, None)

    def clear(self) -> None:
        self._lines.clear()

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def get_line(self, product_id: int) -> CartLine | None:
        return self._lines.get(product_id)

    def __len__(self) -> int:
        return len(self._lines)
