"""Abstract gateway to the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (HTTP, JSON file, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.product import Product


class CatalogGateway(ABC):

    @abstractmethod
    def list_products(self, search_term: str = "") -> list[Product]:
        """Return active products whose name, SKU or barcode match."""

    @abstractmethod
    def get_product(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""
