"""HTTP implementation of TransactionGateway."""

from __future__ import annotations

import logging

from pos.domain.exceptions import GatewayError, SubmissionRejectedError
from pos.domain.gateway.transaction_gateway import TransactionGateway
from pos.domain.model.transaction import TransactionRequest, TransactionResult
from pos.infrastructure.http.api_client import ApiClient, error_message

logger = logging.getLogger(__name__)


class HttpTransactionGateway(TransactionGateway):

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def create_transaction(self, request: TransactionRequest) -> TransactionResult:
        response = self._api.post("/transactions", request.to_payload())
        if response.is_error:
            message = error_message(response, "Transaction failed")
            logger.info("POST /transactions rejected (%d): %s", response.status_code, message)
            raise SubmissionRejectedError(message)

        body = response.json()
        txn = body.get("transaction", body)
        try:
            return TransactionResult(
                id=int(txn["id"]),
                transaction_number=str(txn.get("transaction_number") or txn["id"]),
                message=body.get("message") or "Transaction completed successfully",
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise GatewayError(f"API returned a malformed transaction: {exc}") from exc
