"""Application service: Search Products use case (query)."""

from __future__ import annotations

from pos.application.dto import ProductDTO
from pos.domain.gateway.catalog_gateway import CatalogGateway


class SearchProductsHandler:

    def __init__(self, catalog: CatalogGateway) -> None:
        self._catalog = catalog

    def handle(self, search_term: str = "") -> list[ProductDTO]:
        return [
            ProductDTO(
                id=p.id,
                name=p.name,
                sku=p.sku,
                price=str(p.price),
                stock_quantity=p.stock_quantity,
            )
            for p in self._catalog.list_products(search_term.strip())
        ]
