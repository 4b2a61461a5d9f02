"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

from pos.domain.exceptions import ValidationError

CENTS = Decimal("0.01")

# Leading numeric prefix, the way a browser's parseFloat reads "12.5abc".
_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Amounts may be negative:
    checkout arithmetic (an oversized fixed discount, the tax on it)
    can legitimately go below zero.  Non-negativity of prices is
    enforced by the Product aggregate.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    def scaled(self, rate: Decimal) -> Money:
        """Multiply by a decimal rate, rounding half-up to whole cents."""
        return Money(
            (self.amount * rate).quantize(CENTS, rounding=ROUND_HALF_UP),
            self.currency,
        )

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        if self.amount < 0:
            return f"-${-self.amount:.2f}"
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def parse_tendered(raw: str | None) -> Money:
        """Read a cashier-typed amount, falling back to zero.

        Only the leading numeric part is used ("20abc" is 20); anything
        that does not start with a number is zero.
        """
        match = _NUMERIC_PREFIX.match(raw or "")
        if match is None:
            return Money.zero()
        try:
            value = Decimal(match.group(1))
        except InvalidOperation:
            return Money.zero()
        if not value.is_finite():
            return Money.zero()
        return Money(value)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that a cart line never holds zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


class PaymentMethod(Enum):
    CASH = "cash"
    CARD = "card"
    DIGITAL_WALLET = "digital_wallet"

    @staticmethod
    def parse(raw: str) -> PaymentMethod:
        try:
            return PaymentMethod(raw.strip().lower())
        except ValueError as exc:
            allowed = ", ".join(m.value for m in PaymentMethod)
            raise ValidationError(
                f"Unknown payment method {raw!r} (expected one of: {allowed})"
            ) from exc
