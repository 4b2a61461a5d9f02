"""JSON-file-backed implementation of DiscountGateway."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from pos.domain.gateway.discount_gateway import DiscountGateway
from pos.domain.model.discount import Discount, DiscountKind
from pos.domain.model.value_objects import Money


class JsonDiscountGateway(DiscountGateway):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def list_active_discounts(self) -> list[Discount]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return [self._to_domain(item) for item in raw if item.get("is_active", True)]

    @staticmethod
    def _to_domain(item: dict) -> Discount:
        minimum = item.get("minimum_amount")
        return Discount(
            id=item["id"],
            name=item["name"],
            kind=DiscountKind.parse(item["type"]),
            value=Decimal(str(item["value"])),
            minimum_amount=Money(Decimal(str(minimum))) if minimum is not None else None,
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
