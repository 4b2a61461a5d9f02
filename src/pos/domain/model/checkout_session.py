"""CheckoutSession aggregate — one customer's trip through the till.

The session owns the cart, the discount selection, and the payment-step
inputs, and it is the only place that moves the checkout between states.
Nothing about a session is persisted; a new one starts empty.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from pos.domain.exceptions import (
    EmptyCartError,
    InsufficientPaymentError,
    SubmissionInProgressError,
    ValidationError,
)
from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.discount import Discount
from pos.domain.model.product import Product
from pos.domain.model.transaction import (
    TransactionItem,
    TransactionRequest,
    TransactionResult,
)
from pos.domain.model.value_objects import PaymentMethod
from pos.domain.service.pricing import CheckoutSummary, price_cart


class CheckoutState(Enum):
    BROWSING = "BROWSING"
    REVIEWING_CART = "REVIEWING_CART"
    AWAITING_PAYMENT = "AWAITING_PAYMENT"
    SUBMITTING = "SUBMITTING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


CompletionCallback = Callable[[TransactionResult], None]


class CheckoutSession:
    """Aggregate root for a checkout.

    ``BROWSING`` and ``REVIEWING_CART`` are not stored: they follow from
    whether the cart has lines.  ``FAILED`` is reported to callers as the
    outcome of a rejected submission, but the session itself goes straight
    back to ``AWAITING_PAYMENT`` so the cashier can retry.
    """

    def __init__(
        self,
        discounts: Sequence[Discount] = (),
        on_complete: CompletionCallback | None = None,
    ) -> None:
        self.cart = Cart()
        self.discounts: list[Discount] = list(discounts)
        self.selected_discount_id: int | None = None
        self.customer_name: str | None = None
        self.customer_email: str | None = None
        self.payment_method = PaymentMethod.CASH
        self.amount_tendered = ""
        self.last_error: str | None = None
        self.result: TransactionResult | None = None
        self._on_complete = on_complete
        self._paying = False
        self._submitting = False

    # --- State ----------------------------------------------------------------

    @property
    def state(self) -> CheckoutState:
        if self.result is not None:
            return CheckoutState.COMPLETED
        if self._submitting:
            return CheckoutState.SUBMITTING
        if self._paying:
            return CheckoutState.AWAITING_PAYMENT
        if self.cart.is_empty:
            return CheckoutState.BROWSING
        return CheckoutState.REVIEWING_CART

    @property
    def summary(self) -> CheckoutSummary:
        return price_cart(
            self.cart.lines,
            self.selected_discount_id,
            self.discounts,
            self.amount_tendered,
        )

    # --- Cart -----------------------------------------------------------------

    def add_item(self, product: Product) -> CartLine:
        self._assert_cart_editable()
        return self.cart.add_item(product)

    def set_quantity(self, product_id: int, new_quantity: int) -> None:
        self._assert_cart_editable()
        self.cart.set_quantity(product_id, new_quantity)
        self._leave_payment_if_empty()

    def remove_item(self, product_id: int) -> None:
        self._assert_cart_editable()
        self.cart.remove_item(product_id)
        self._leave_payment_if_empty()

    def clear(self) -> None:
        self._assert_cart_editable()
        self.cart.clear()
        self._leave_payment_if_empty()

    # --- Checkout details -----------------------------------------------------

    def select_discount(self, discount_id: int | None) -> None:
        """Select a discount by id, or ``None`` for no discount.

        An id missing from the active list is kept but prices as no discount.
        """
        self._assert_cart_editable()
        self.selected_discount_id = discount_id

    def set_customer(self, name: str | None = None, email: str | None = None) -> None:
        self._assert_cart_editable()
        self.customer_name = (name or "").strip() or None
        self.customer_email = (email or "").strip() or None

    def set_payment(self, method: PaymentMethod, amount_tendered: str) -> None:
        if self.state != CheckoutState.AWAITING_PAYMENT:
            raise ValidationError(
                f"Cannot take payment — current state is {self.state.value}, "
                f"expected AWAITING_PAYMENT"
            )
        self.payment_method = method
        self.amount_tendered = amount_tendered

    # --- State transitions ----------------------------------------------------

    def proceed_to_payment(self) -> None:
        """REVIEWING_CART -> AWAITING_PAYMENT."""
        if self.cart.is_empty:
            raise EmptyCartError("Cart is empty")
        if self.state != CheckoutState.REVIEWING_CART:
            raise ValidationError(
                f"Cannot proceed to payment — current state is {self.state.value}"
            )
        self._paying = True
        self.last_error = None

    def back(self) -> None:
        """AWAITING_PAYMENT -> REVIEWING_CART, dropping the payment inputs."""
        if self.state != CheckoutState.AWAITING_PAYMENT:
            raise ValidationError(
                f"Cannot go back — current state is {self.state.value}, "
                f"expected AWAITING_PAYMENT"
            )
        self._reset_payment()

    def begin_submission(self) -> TransactionRequest:
        """AWAITING_PAYMENT -> SUBMITTING.

        Returns the payload to send.  Only one submission may be in flight.
        """
        if self._submitting:
            raise SubmissionInProgressError("Transaction is already being processed")
        if self.state != CheckoutState.AWAITING_PAYMENT:
            raise ValidationError(
                f"Cannot submit — current state is {self.state.value}, "
                f"expected AWAITING_PAYMENT"
            )

        summary = self.summary
        if summary.amount_paid < summary.total:
            raise InsufficientPaymentError(
                f"Insufficient payment amount ({summary.amount_paid} "
                f"tendered, {summary.total} due)"
            )

        self._submitting = True
        self.last_error = None
        return TransactionRequest(
            items=tuple(
                TransactionItem(product_id=line.product_id, quantity=line.quantity.value)
                for line in self.cart.lines
            ),
            payment_method=self.payment_method,
            amount_paid=summary.amount_paid,
            customer_name=self.customer_name,
            customer_email=self.customer_email,
            discount_id=self.selected_discount_id,
        )

    def mark_completed(self, result: TransactionResult) -> None:
        """SUBMITTING -> COMPLETED.  Clears the cart and fires the callback."""
        self._assert_submitting()
        self._submitting = False
        self.result = result
        self.cart.clear()
        if self._on_complete is not None:
            self._on_complete(result)

    def mark_failed(self, message: str) -> None:
        """SUBMITTING -> AWAITING_PAYMENT, keeping the service's message."""
        self._assert_submitting()
        self._submitting = False
        self.last_error = message

    # --- Internal helpers -----------------------------------------------------

    def _assert_cart_editable(self) -> None:
        if self.state == CheckoutState.SUBMITTING:
            raise SubmissionInProgressError(
                "Cannot change the checkout while the transaction is being processed"
            )
        if self.state == CheckoutState.COMPLETED:
            raise ValidationError("Checkout is already completed; start a new one")

    def _assert_submitting(self) -> None:
        if not self._submitting:
            raise ValidationError(
                f"No submission in flight — current state is {self.state.value}"
            )

    def _leave_payment_if_empty(self) -> None:
        if self.cart.is_empty:
            self._reset_payment()

    def _reset_payment(self) -> None:
        self._paying = False
        self.payment_method = PaymentMethod.CASH
        self.amount_tendered = ""
