"""Application service: Complete Transaction use case.

Orchestrates the CheckoutSession aggregate (payment validation and state
transitions) and the transaction gateway (the single create call).
A rejection from the service is an expected outcome, not an error: it
is reported back as FAILED and the session stays ready for a retry.
"""

from __future__ import annotations

import logging

from pos.application.dto import CheckoutOutcomeDTO
from pos.domain.exceptions import SubmissionRejectedError
from pos.domain.gateway.transaction_gateway import TransactionGateway
from pos.domain.model.checkout_session import CheckoutSession, CheckoutState

logger = logging.getLogger(__name__)


class CompleteTransactionHandler:

    def __init__(self, transaction_gateway: TransactionGateway) -> None:
        self._transaction_gateway = transaction_gateway

    def handle(self, session: CheckoutSession) -> CheckoutOutcomeDTO:
        """Submit the session's sale.

        Steps:
        1. Let the session validate the payment and enter SUBMITTING
           (raises InsufficientPaymentError / SubmissionInProgressError).
        2. Send the payload to the transaction service.
        3. Resolve the session to COMPLETED or back to AWAITING_PAYMENT.
        """
        request = session.begin_submission()
        summary = session.summary
        logger.info(
            "Submitting transaction: %d line(s), total %s, paid %s",
            len(request.items),
            summary.total,
            request.amount_paid,
        )

        try:
            result = self._transaction_gateway.create_transaction(request)
        except SubmissionRejectedError as exc:
            session.mark_failed(str(exc))
            logger.warning("Transaction rejected: %s", exc)
            return CheckoutOutcomeDTO(
                status=CheckoutState.FAILED.value,
                message=str(exc),
            )
        except Exception:
            session.mark_failed("Transaction failed")
            raise

        session.mark_completed(result)
        logger.info("Transaction %s completed", result.transaction_number)
        return CheckoutOutcomeDTO(
            status=CheckoutState.COMPLETED.value,
            message=result.message,
            transaction_id=result.id,
            transaction_number=result.transaction_number,
            total=str(summary.total),
            change=str(summary.change),
        )
