"""Domain service: checkout pricing.

Pure functions that turn cart lines and a discount selection into a
checkout summary.  Nothing here keeps state; callers recompute the
summary whenever they need it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from pos.domain.model.cart import CartLine
from pos.domain.model.discount import Discount
from pos.domain.model.value_objects import Money

TAX_RATE = Decimal("0.08")


@dataclass(frozen=True)
class CheckoutSummary:
    subtotal: Money
    discount_amount: Money
    tax: Money
    total: Money
    amount_paid: Money
    change: Money

    @property
    def is_fully_paid(self) -> bool:
        return self.amount_paid >= self.total


def compute_subtotal(lines: Iterable[CartLine]) -> Money:
    result = Money.zero()
    for line in lines:
        result = result + line.line_total
    return result


def resolve_discount(
    discount_id: int | None, discounts: Sequence[Discount]
) -> Discount | None:
    """Look up the selected discount; an unknown id resolves to none."""
    if discount_id is None:
        return None
    for discount in discounts:
        if discount.id == discount_id:
            return discount
    return None


def compute_discount(subtotal: Money, discount: Discount | None) -> Money:
    if discount is None:
        return Money.zero()
    return discount.amount_for(subtotal)


def compute_tax(subtotal: Money, discount_amount: Money) -> Money:
    """Flat tax on the discounted base, negative bases included."""
    return (subtotal - discount_amount).scaled(TAX_RATE)


def compute_change(amount_paid: Money, total: Money) -> Money:
    change = amount_paid - total
    if change.is_negative:
        return Money.zero()
    return change


def price_cart(
    lines: Iterable[CartLine],
    discount_id: int | None,
    discounts: Sequence[Discount],
    amount_tendered: str | None = None,
) -> CheckoutSummary:
    """Price a cart.

    Steps:
    1. Sum the line totals.
    2. Apply the selected discount if it exists and its minimum is met.
    3. Tax the discounted base at ``TAX_RATE``.
    4. Total, then the change owed for *amount_tendered* (never negative).
    """
    subtotal = compute_subtotal(lines)
    discount_amount = compute_discount(subtotal, resolve_discount(discount_id, discounts))
    tax = compute_tax(subtotal, discount_amount)
    total = subtotal - discount_amount + tax
    amount_paid = Money.parse_tendered(amount_tendered)

    return CheckoutSummary(
        subtotal=subtotal,
        discount_amount=discount_amount,
        tax=tax,
        total=total,
        amount_paid=amount_paid,
        change=compute_change(amount_paid, total),
    )
