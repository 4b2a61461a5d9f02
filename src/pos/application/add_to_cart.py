"""Application service: Add To Cart use case.

Resolves the product through the catalog so the cart line snapshots
the current price and stock count.
"""

from __future__ import annotations

import logging

from pos.application.dto import CartItemSpec
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.gateway.catalog_gateway import CatalogGateway
from pos.domain.model.checkout_session import CheckoutSession

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, catalog: CatalogGateway) -> None:
        self._catalog = catalog

    def handle(self, session: CheckoutSession, product_id: int) -> None:
        """Add one unit of a product to the session's cart."""
        product = self._catalog.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        line = session.add_item(product)
        logger.debug("Cart: %s x%d", product.name, line.quantity.value)

    def handle_many(self, session: CheckoutSession, specs: list[CartItemSpec]) -> None:
        """Ring up several products at once.

        The first unit goes through ``add_item`` so stock is checked; the
        rest is a quantity update and is clamped to stock like any other.
        A quantity of zero or less removes the line again.
        """
        for spec in specs:
            self.handle(session, spec.product_id)
            if spec.quantity != 1:
                session.set_quantity(spec.product_id, spec.quantity)
