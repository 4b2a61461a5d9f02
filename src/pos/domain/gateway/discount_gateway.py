"""Abstract gateway to the discount list."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.discount import Discount


class DiscountGateway(ABC):

    @abstractmethod
    def list_active_discounts(self) -> list[Discount]:
        """Return every discount that can currently be applied."""
