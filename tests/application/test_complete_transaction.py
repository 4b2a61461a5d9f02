"""Integration tests for the CompleteTransaction and ShowSummary use cases."""

import pytest

from pos.application.add_to_cart import AddToCartHandler
from pos.application.complete_transaction import CompleteTransactionHandler
from pos.application.dto import CartItemSpec
from pos.application.show_summary import ShowSummaryHandler
from pos.application.start_checkout import StartCheckoutHandler
from pos.domain.exceptions import (
    GatewayError,
    InsufficientPaymentError,
    SubmissionInProgressError,
)
from pos.domain.model.checkout_session import CheckoutState
from pos.domain.model.value_objects import PaymentMethod
from tests.fakes import (
    FakeCatalogGateway,
    FakeDiscountGateway,
    FakeTransactionGateway,
    make_product,
    percentage_discount,
)


def _ready_to_pay(amount: str = "300", completed: list | None = None):
    """Helper: a session with 2 x $100.00 in the payment step."""
    catalog = FakeCatalogGateway([make_product(id=1, price="100.00", stock=10)])
    discounts = FakeDiscountGateway([percentage_discount(id=1, value="10", minimum="50")])
    on_complete = completed.append if completed is not None else None

    session = StartCheckoutHandler(discounts).handle(on_complete=on_complete)
    AddToCartHandler(catalog).handle_many(session, [CartItemSpec(1, 2)])
    session.proceed_to_payment()
    session.set_payment(PaymentMethod.CASH, amount)
    return session


class TestCompleteTransactionHappyPath:

    def test_completes_and_clears_cart(self):
        completed = []
        session = _ready_to_pay("300", completed)
        gateway = FakeTransactionGateway()

        outcome = CompleteTransactionHandler(gateway).handle(session)

        assert outcome.status == "COMPLETED"
        assert outcome.transaction_number == "TXN-000001"
        assert outcome.total == "$216.00"
        assert outcome.change == "$84.00"
        assert session.state == CheckoutState.COMPLETED
        assert session.cart.is_empty
        assert len(completed) == 1

    def test_sends_exact_payload(self):
        session = _ready_to_pay("194.40")
        session.select_discount(1)
        session.set_customer("Bea", "bea@example.com")
        gateway = FakeTransactionGateway()

        CompleteTransactionHandler(gateway).handle(session)

        request = gateway.requests[0]
        assert request.discount_id == 1
        assert request.customer_email == "bea@example.com"
        assert [(i.product_id, i.quantity) for i in request.items] == [(1, 2)]


class TestCompleteTransactionFailures:

    def test_insufficient_payment_never_reaches_gateway(self):
        session = _ready_to_pay("100")
        gateway = FakeTransactionGateway()

        with pytest.raises(InsufficientPaymentError):
            CompleteTransactionHandler(gateway).handle(session)

        assert gateway.requests == []
        assert session.state == CheckoutState.AWAITING_PAYMENT

    def test_rejection_is_reported_verbatim_and_retryable(self):
        session = _ready_to_pay("300")
        gateway = FakeTransactionGateway(reject_with="Insufficient stock for Widget")
        handler = CompleteTransactionHandler(gateway)

        outcome = handler.handle(session)

        assert outcome.status == "FAILED"
        assert outcome.message == "Insufficient stock for Widget"
        assert session.state == CheckoutState.AWAITING_PAYMENT
        assert session.cart.get_line(1).quantity.value == 2

        gateway.reject_with = None
        assert handler.handle(session).status == "COMPLETED"
        assert len(gateway.requests) == 2

    def test_gateway_outage_restores_payment_step(self):
        session = _ready_to_pay("300")

        def unreachable(_request):
            raise GatewayError("Could not reach the POS API")

        handler = CompleteTransactionHandler(FakeTransactionGateway(on_submit=unreachable))
        with pytest.raises(GatewayError):
            handler.handle(session)

        assert session.state == CheckoutState.AWAITING_PAYMENT
        assert session.last_error == "Transaction failed"

    def test_repeated_click_while_in_flight_is_rejected(self):
        session = _ready_to_pay("300")
        gateway = FakeTransactionGateway()
        handler = CompleteTransactionHandler(gateway)

        def click_again(_request):
            with pytest.raises(SubmissionInProgressError):
                handler.handle(session)

        gateway.on_submit = click_again
        outcome = handler.handle(session)

        assert outcome.status == "COMPLETED"
        assert len(gateway.requests) == 1


class TestShowSummary:

    def test_formats_summary(self):
        session = _ready_to_pay("300")
        session.select_discount(1)

        dto = ShowSummaryHandler().handle(session)

        assert dto.state == "AWAITING_PAYMENT"
        assert dto.items[0].line_total == "$200.00"
        assert dto.subtotal == "$200.00"
        assert dto.discount == "$20.00"
        assert dto.tax == "$14.40"
        assert dto.total == "$194.40"
        assert dto.change == "$105.60"
        assert dto.has_discount
        assert dto.last_error is None
