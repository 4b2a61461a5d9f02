"""Thin httpx wrapper for the POS REST API.

Adds the bearer token, turns transport failures and 401s into domain
gateway errors, and pulls the API's ``message`` out of error bodies.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any

import httpx

from pos.domain.exceptions import AuthenticationRequiredError, GatewayError

logger = logging.getLogger(__name__)


class ApiClient:
    """Client for the POS API."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    def get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        return self._send("GET", path, params=params)

    def post(self, path: str, payload: dict[str, Any]) -> httpx.Response:
        return self._send("POST", path, json=payload)

    def close(self) -> None:
        self.client.close()

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s", method, path)
        try:
            response = self.client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise GatewayError(f"Could not reach the POS API: {exc}") from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)
        if response.status_code == 401:
            raise AuthenticationRequiredError("Not authenticated — log in again")
        return response


def error_message(response: httpx.Response, default: str) -> str:
    """The API's own error message, or *default* when it has none."""
    try:
        body = response.json()
    except ValueError:
        return default
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return default


def to_decimal(raw: Any, default: str = "0") -> Decimal:
    """Laravel serialises decimal columns as strings, sometimes as numbers."""
    if raw is None or raw == "":
        return Decimal(default)
    try:
        return Decimal(str(raw))
    except InvalidOperation as exc:
        raise GatewayError(f"API returned a malformed amount: {raw!r}") from exc
