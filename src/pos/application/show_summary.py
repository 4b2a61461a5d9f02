"""Application service: Show Summary use case (query)."""

from __future__ import annotations

from pos.application.dto import CartLineDTO, CheckoutSummaryDTO
from pos.domain.model.checkout_session import CheckoutSession


class ShowSummaryHandler:

    def handle(self, session: CheckoutSession) -> CheckoutSummaryDTO:
        summary = session.summary
        return CheckoutSummaryDTO(
            state=session.state.value,
            items=[
                CartLineDTO(
                    product_id=line.product_id,
                    product_name=line.product.name,
                    quantity=line.quantity.value,
                    unit_price=str(line.product.price),
                    line_total=str(line.line_total),
                )
                for line in session.cart.lines
            ],
            subtotal=str(summary.subtotal),
            discount=str(summary.discount_amount),
            tax=str(summary.tax),
            total=str(summary.total),
            amount_paid=str(summary.amount_paid),
            change=str(summary.change),
            has_discount=summary.discount_amount.amount > 0,
            last_error=session.last_error,
        )
