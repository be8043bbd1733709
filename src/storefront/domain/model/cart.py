"""ShoppingCart aggregate — the session's line items and their totals.

The cart owns at most one line item per product id.  Adding a product
that is already present merges quantities; ``update_quantity`` replaces
them.  Every mutation commits immediately and is written through the
``CartRepository`` so the cart survives a reload of the same session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineItem:
    """A (product, quantity) pair inside a cart.

    The full product is embedded so the persisted cart can be rendered
    without consulting the catalog.
    """

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


class ShoppingCart:
    """Aggregate root for the session cart.

    Invariants:
    - at most one ``LineItem`` per product id
    - every line item has a quantity >= 1
    - new products are appended; existing lines keep their position
    """

    def __init__(self, repository: CartRepository) -> None:
        self._repository = repository
        # dict preserves insertion order and gives O(1) membership
        self._lines: dict[str, LineItem] = {}
        for line in repository.load():
            if line.product_id in self._lines:
                merged = self._lines[line.product_id].quantity + line.quantity
                self._lines[line.product_id] = LineItem(line.product, merged)
            else:
                self._lines[line.product_id] = line

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product, quantity: int = 1) -> None:
        """Add *quantity* units of *product*, merging with an existing line.

        Quantities below 1 are clamped to 1.  Stock is not checked here;
        callers decide whether an out-of-stock product may be added.
        """
        if quantity < 1:
            logger.debug("Clamping add quantity %s to 1 for product %s", quantity, product.id)
            quantity = 1

        existing = self._lines.get(product.id)
        if existing is None:
            self._lines[product.id] = LineItem(product, Quantity(quantity))
        else:
            self._lines[product.id] = LineItem(
                existing.product, existing.quantity + Quantity(quantity)
            )
        logger.debug("Added %d x %s to cart", quantity, product.id)
        self._persist()

    def remove_item(self, product_id: str) -> None:
        """Remove the line for *product_id*; absent ids are ignored."""
        if self._lines.pop(product_id, None) is not None:
            logger.debug("Removed %s from cart", product_id)
        self._persist()

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set the quantity of an existing line to exactly *quantity*.

        ``quantity <= 0`` removes the line.  Unknown product ids are a
        no-op.
        """
        if quantity <= 0:
            self.remove_item(product_id)
            return

        existing = self._lines.get(product_id)
        if existing is not None:
            self._lines[product_id] = LineItem(existing.product, Quantity(quantity))
            logger.debug("Set quantity of %s to %d", product_id, quantity)
        self._persist()

    def clear(self) -> None:
        self._lines.clear()
        logger.debug("Cart cleared")
        self._persist()

    # --- Queries --------------------------------------------------------------

    def is_in_cart(self, product_id: str) -> bool:
        return product_id in self._lines

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    # --- Computed properties (recomputed on every read) -----------------------

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self._lines.values())

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for line in self._lines.values():
            result = result + line.line_total
        return result

    # --- Internal helpers -----------------------------------------------------

    def _persist(self) -> None:
        self._repository.save(list(self._lines.values()))
