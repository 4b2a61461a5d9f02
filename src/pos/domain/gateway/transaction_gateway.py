"""Abstract gateway to the transaction service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.transaction import TransactionRequest, TransactionResult


class TransactionGateway(ABC):

    @abstractmethod
    def create_transaction(self, request: TransactionRequest) -> TransactionResult:
        """Record a sale.

        Raises SubmissionRejectedError with the service's own message
        when the sale is refused (e.g. a stock conflict).
        """
