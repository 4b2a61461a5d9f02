"""JSON-file-backed implementation of TransactionGateway.

Plays the part of the transaction service when running offline: it
re-prices the sale from the catalog, refuses stock conflicts, deducts
stock and appends the transaction to ``transactions.json``.

Validate-then-mutate: every line is checked before any stock moves, so
a rejected sale leaves the catalog untouched.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from pos.domain.exceptions import SubmissionRejectedError
from pos.domain.gateway.transaction_gateway import TransactionGateway
from pos.domain.model.cart import CartLine
from pos.domain.model.transaction import TransactionRequest, TransactionResult
from pos.domain.model.value_objects import Quantity
from pos.domain.service.pricing import price_cart
from pos.infrastructure.persistence.json_catalog_gateway import JsonCatalogGateway
from pos.infrastructure.persistence.json_discount_gateway import JsonDiscountGateway


class JsonTransactionGateway(TransactionGateway):

    def __init__(
        self,
        file_path: Path,
        catalog: JsonCatalogGateway,
        discounts: JsonDiscountGateway,
    ) -> None:
        self._file_path = file_path
        self._catalog = catalog
        self._discounts = discounts
        self._ensure_file()

    def create_transaction(self, request: TransactionRequest) -> TransactionResult:
        if not request.items:
            raise SubmissionRejectedError("Transaction must contain at least one item")

        # Phase 1: resolve and validate every line
        lines: list[CartLine] = []
        for item in request.items:
            product = self._catalog.get_product(item.product_id)
            if product is None:
                raise SubmissionRejectedError(f"Product #{item.product_id} not found")
            if item.quantity > product.stock_quantity:
                raise SubmissionRejectedError(
                    f"Insufficient stock for {product.name} "
                    f"(requested {item.quantity}, available {product.stock_quantity})"
                )
            lines.append(CartLine(product=product, quantity=Quantity(item.quantity)))

        summary = price_cart(
            lines,
            request.discount_id,
            self._discounts.list_active_discounts(),
            str(request.amount_paid.amount),
        )
        if summary.amount_paid < summary.total:
            raise SubmissionRejectedError("Insufficient payment amount")

        # Phase 2: mutate and persist
        self._catalog.deduct_stock({line.product_id: line.quantity.value for line in lines})

        transactions = self._load_raw()
        txn_id = max((t["id"] for t in transactions), default=0) + 1
        now = datetime.now(timezone.utc)
        number = f"TXN-{now:%Y%m%d}-{txn_id:06d}"
        transactions.append(
            {
                "id": txn_id,
                "transaction_number": number,
                "created_at": now.isoformat(),
                "customer_name": request.customer_name,
                "customer_email": request.customer_email,
                "payment_method": request.payment_method.value,
                "discount_id": request.discount_id,
                "items": [
                    {
                        "product_id": line.product_id,
                        "quantity": line.quantity.value,
                        "unit_price": str(line.product.price.amount),
                        "total": str(line.line_total.amount),
                    }
                    for line in lines
                ],
                "subtotal": str(summary.subtotal.amount),
                "discount_amount": str(summary.discount_amount.amount),
                "tax_amount": str(summary.tax.amount),
                "total_amount": str(summary.total.amount),
                "amount_paid": str(summary.amount_paid.amount),
                "change_amount": str(summary.change.amount),
            }
        )
        self._persist_raw(transactions)

        return TransactionResult(id=txn_id, transaction_number=number)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, transactions: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(transactions, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
