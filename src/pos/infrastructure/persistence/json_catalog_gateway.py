"""JSON-file-backed implementation of CatalogGateway.

Used when no API is configured.  Besides the read-only gateway
interface it can deduct stock, which the JSON transaction store needs.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from pos.domain.gateway.catalog_gateway import CatalogGateway
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money


class JsonCatalogGateway(CatalogGateway):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CatalogGateway interface ---------------------------------------------

    def list_products(self, search_term: str = "") -> list[Product]:
        term = search_term.strip().lower()
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw.get("is_active", True) and self._matches(raw, term)
        ]

    def get_product(self, product_id: int) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    # --- Stock ----------------------------------------------------------------

    def deduct_stock(self, quantities: dict[int, int]) -> None:
        """Subtract sold units.  Callers check availability first."""
        rows = self._load_raw()
        for raw in rows:
            if raw["id"] in quantities:
                raw["stock_quantity"] -= quantities[raw["id"]]
        self._persist_raw(rows)

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _matches(raw: dict, term: str) -> bool:
        if not term:
            return True
        fields = (raw.get("name", ""), raw.get("sku", ""), raw.get("barcode", ""))
        return any(term in (value or "").lower() for value in fields)

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(str(raw["price"])), raw.get("currency", "USD")),
            stock_quantity=raw.get("stock_quantity", 0),
            sku=raw.get("sku", ""),
            barcode=raw.get("barcode", ""),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, rows: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(rows, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
