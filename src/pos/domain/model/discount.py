"""Discount reference entity.

Discounts are managed by the back office and fetched as a list of the
currently active ones.  A checkout selects at most one.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money


class DiscountKind(Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"

    @staticmethod
    def parse(raw: str) -> DiscountKind:
        # Anything that is not a percentage is treated as a fixed amount.
        if raw.strip().lower() == DiscountKind.PERCENTAGE.value:
            return DiscountKind.PERCENTAGE
        return DiscountKind.FIXED


@dataclass(frozen=True)
class Discount:
    id: int
    name: str
    kind: DiscountKind
    value: Decimal
    minimum_amount: Money | None = None

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValidationError(f"Discount value cannot be negative, got {self.value}")

    def qualifies(self, subtotal: Money) -> bool:
        """A zero or missing minimum means every subtotal qualifies."""
        if self.minimum_amount is None or self.minimum_amount.amount == 0:
            return True
        return subtotal >= self.minimum_amount

    def amount_for(self, subtotal: Money) -> Money:
        """Discount granted on *subtotal*.

        Fixed discounts are not capped at the subtotal, so they can push
        the taxable base below zero.
        """
        if not self.qualifies(subtotal):
            return Money.zero()
        if self.kind is DiscountKind.PERCENTAGE:
            return subtotal.scaled(self.value / Decimal(100))
        return Money(self.value, subtotal.currency).scaled(Decimal(1))

    def label(self) -> str:
        if self.kind is DiscountKind.PERCENTAGE:
            return f"{self.name} - {self.value.normalize():f}%"
        return f"{self.name} - {Money(self.value)}"
