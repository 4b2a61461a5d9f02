"""Application service: Start Checkout use case.

A checkout prices against the discount list as it stood when the
session opened; the list is fetched once here.
"""

from __future__ import annotations

import logging

from pos.domain.gateway.discount_gateway import DiscountGateway
from pos.domain.model.checkout_session import CheckoutSession, CompletionCallback

logger = logging.getLogger(__name__)


class StartCheckoutHandler:

    def __init__(self, discount_gateway: DiscountGateway) -> None:
        self._discount_gateway = discount_gateway

    def handle(self, on_complete: CompletionCallback | None = None) -> CheckoutSession:
        discounts = self._discount_gateway.list_active_discounts()
        logger.debug("Starting checkout with %d active discount(s)", len(discounts))
        return CheckoutSession(discounts=discounts, on_complete=on_complete)
