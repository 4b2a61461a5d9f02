"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the cashier rang up (product ID + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    sku: str
    price: str  # formatted, e.g. "$15.00"
    stock_quantity: int


@dataclass(frozen=True)
class DiscountDTO:
    id: int
    label: str


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the cashier."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CheckoutSummaryDTO:
    state: str
    items: list[CartLineDTO]
    subtotal: str
    discount: str
    tax: str
    total: str
    amount_paid: str
    change: str
    has_discount: bool
    last_error: str | None


@dataclass(frozen=True)
class CheckoutOutcomeDTO:
    """Output: how a submission ended (COMPLETED or FAILED)."""

    status: str
    message: str
    transaction_id: int | None = None
    transaction_number: str | None = None
    total: str | None = None
    change: str | None = None
