"""What the checkout hands to the transaction service, and what it gets back."""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.value_objects import Money, PaymentMethod


@dataclass(frozen=True)
class TransactionItem:
    product_id: int
    quantity: int


@dataclass(frozen=True)
class TransactionRequest:
    """Payload for creating a sale.

    Prices are not sent: the transaction service re-prices the items
    from its own catalog and applies the discount by id.
    """

    items: tuple[TransactionItem, ...]
    payment_method: PaymentMethod
    amount_paid: Money
    customer_name: str | None = None
    customer_email: str | None = None
    discount_id: int | None = None

    def to_payload(self) -> dict:
        return {
            "customer_name": self.customer_name,
            "customer_email": self.customer_email,
            "items": [
                {"product_id": item.product_id, "quantity": item.quantity}
                for item in self.items
            ],
            "payment_method": self.payment_method.value,
            "amount_paid": float(self.amount_paid.amount),
            "discount_id": self.discount_id,
        }


@dataclass(frozen=True)
class TransactionResult:
    id: int
    transaction_number: str
    message: str = "Transaction completed successfully"
