"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

import click

from pos.domain.gateway.catalog_gateway import CatalogGateway
from pos.domain.gateway.discount_gateway import DiscountGateway
from pos.domain.gateway.transaction_gateway import TransactionGateway
from pos.infrastructure.config import Settings
from pos.infrastructure.http.api_client import ApiClient
from pos.infrastructure.http.http_catalog_gateway import HttpCatalogGateway
from pos.infrastructure.http.http_discount_gateway import HttpDiscountGateway
from pos.infrastructure.http.http_transaction_gateway import HttpTransactionGateway
from pos.infrastructure.persistence.json_catalog_gateway import JsonCatalogGateway
from pos.infrastructure.persistence.json_discount_gateway import JsonDiscountGateway
from pos.infrastructure.persistence.json_transaction_gateway import (
    JsonTransactionGateway,
)


@dataclass(frozen=True)
class Gateways:
    catalog: CatalogGateway
    discounts: DiscountGateway
    transactions: TransactionGateway
    api: ApiClient | None = None

    def close(self) -> None:
        if self.api is not None:
            self.api.close()

    def __enter__(self) -> Gateways:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def gateways(settings: Settings) -> Gateways:
    if settings.uses_api:
        api = ApiClient(
            base_url=settings.api_url,  # type: ignore[arg-type]
            token=settings.api_token,
            timeout=settings.http_timeout,
        )
        return Gateways(
            catalog=HttpCatalogGateway(api),
            discounts=HttpDiscountGateway(api),
            transactions=HttpTransactionGateway(api),
            api=api,
        )

    catalog = JsonCatalogGateway(settings.data_dir / "products.json")
    discounts = JsonDiscountGateway(settings.data_dir / "discounts.json")
    return Gateways(
        catalog=catalog,
        discounts=discounts,
        transactions=JsonTransactionGateway(
            settings.data_dir / "transactions.json", catalog, discounts
        ),
    )


def open_gateways(settings: Settings) -> Gateways:
    """Gateways closed when the running click command finishes."""
    return click.get_current_context().with_resource(gateways(settings))
