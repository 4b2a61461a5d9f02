"""HTTP implementation of CatalogGateway."""

from __future__ import annotations

from typing import Any

from pos.domain.exceptions import GatewayError, ValidationError
from pos.domain.gateway.catalog_gateway import CatalogGateway
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.infrastructure.http.api_client import ApiClient, error_message, to_decimal


class HttpCatalogGateway(CatalogGateway):

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def list_products(self, search_term: str = "") -> list[Product]:
        response = self._api.get(
            "/products", params={"search": search_term, "active_only": True}
        )
        if response.is_error:
            raise GatewayError(error_message(response, "Could not load products"))

        body = response.json()
        # Paginated responses nest the rows under data.data
        rows = body.get("data", []) if isinstance(body, dict) else body
        if isinstance(rows, dict):
            rows = rows.get("data", [])
        return [self._to_domain(row) for row in rows]

    def get_product(self, product_id: int) -> Product | None:
        response = self._api.get(f"/products/{product_id}")
        if response.status_code == 404:
            return None
        if response.is_error:
            raise GatewayError(error_message(response, "Could not load product"))

        body = response.json()
        row = body.get("product", body.get("data", body))
        return self._to_domain(row)

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_domain(row: dict[str, Any]) -> Product:
        try:
            return Product(
                id=int(row["id"]),
                name=row["name"],
                price=Money(to_decimal(row.get("price"))),
                stock_quantity=int(row.get("stock_quantity") or 0),
                sku=row.get("sku") or "",
                barcode=row.get("barcode") or "",
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise GatewayError(f"API returned a malformed product: {exc}") from exc
