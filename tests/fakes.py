"""In-memory fake gateways for testing.

These implement the same abstract interfaces as the HTTP and JSON
gateways but keep everything in a dict. No network, no file I/O.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

from pos.domain.exceptions import SubmissionRejectedError
from pos.domain.gateway.catalog_gateway import CatalogGateway
from pos.domain.gateway.discount_gateway import DiscountGateway
from pos.domain.gateway.transaction_gateway import TransactionGateway
from pos.domain.model.discount import Discount, DiscountKind
from pos.domain.model.product import Product
from pos.domain.model.transaction import TransactionRequest, TransactionResult
from pos.domain.model.value_objects import Money


def make_product(
    id: int = 1, name: str = "Widget", price: str = "100.00", stock: int = 10
) -> Product:
    return Product(id=id, name=name, price=Money.of(price), stock_quantity=stock)


def percentage_discount(
    id: int = 1, value: str = "10", minimum: str | None = "50"
) -> Discount:
    return Discount(
        id=id,
        name=f"{value}% off",
        kind=DiscountKind.PERCENTAGE,
        value=Decimal(value),
        minimum_amount=Money.of(minimum) if minimum is not None else None,
    )


def fixed_discount(id: int = 2, value: str = "20.00", minimum: str | None = None) -> Discount:
    return Discount(
        id=id,
        name=f"{value} off",
        kind=DiscountKind.FIXED,
        value=Decimal(value),
        minimum_amount=Money.of(minimum) if minimum is not None else None,
    )


class FakeCatalogGateway(CatalogGateway):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def list_products(self, search_term: str = "") -> list[Product]:
        term = search_term.lower()
        return [p for p in self._store.values() if term in p.name.lower()]

    def get_product(self, product_id: int) -> Product | None:
        return self._store.get(product_id)


class FakeDiscountGateway(DiscountGateway):

    def __init__(self, discounts: list[Discount] | None = None) -> None:
        self._discounts = list(discounts or [])

    def list_active_discounts(self) -> list[Discount]:
        return list(self._discounts)


class FakeTransactionGateway(TransactionGateway):
    """Records every request.

    ``reject_with`` makes the next submissions fail with that message;
    ``on_submit`` runs while the request is "in flight".
    """

    def __init__(
        self,
        reject_with: str | None = None,
        on_submit: Callable[[TransactionRequest], None] | None = None,
    ) -> None:
        self.requests: list[TransactionRequest] = []
        self.reject_with = reject_with
        self.on_submit = on_submit

    def create_transaction(self, request: TransactionRequest) -> TransactionResult:
        self.requests.append(request)
        if self.on_submit is not None:
            self.on_submit(request)
        if self.reject_with is not None:
            raise SubmissionRejectedError(self.reject_with)
        n = len(self.requests)
        return TransactionResult(id=n, transaction_number=f"TXN-{n:06d}")
