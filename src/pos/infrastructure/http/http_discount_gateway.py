"""HTTP implementation of DiscountGateway."""

from __future__ import annotations

from typing import Any

from pos.domain.exceptions import GatewayError, ValidationError
from pos.domain.gateway.discount_gateway import DiscountGateway
from pos.domain.model.discount import Discount, DiscountKind
from pos.domain.model.value_objects import Money
from pos.infrastructure.http.api_client import ApiClient, error_message, to_decimal


class HttpDiscountGateway(DiscountGateway):

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def list_active_discounts(self) -> list[Discount]:
        response = self._api.get("/discounts/active/list")
        if response.is_error:
            raise GatewayError(error_message(response, "Could not load discounts"))
        body = response.json()
        return [self._to_domain(row) for row in body.get("discounts", [])]

    @staticmethod
    def _to_domain(row: dict[str, Any]) -> Discount:
        minimum = row.get("minimum_amount")
        try:
            return Discount(
                id=int(row["id"]),
                name=row.get("name") or f"Discount #{row['id']}",
                kind=DiscountKind.parse(row.get("type") or ""),
                value=to_decimal(row.get("value")),
                minimum_amount=Money(to_decimal(minimum)) if minimum not in (None, "") else None,
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise GatewayError(f"API returned a malformed discount: {exc}") from exc
