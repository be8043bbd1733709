"""Abstract repository for the session cart.

Implementations own serialization and must be fail-soft: a missing or
corrupt stored cart loads as empty, and a failed write is swallowed
after logging.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.domain.model.cart import LineItem

CART_STORAGE_KEY = "storefront-cart"


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> list[LineItem]:
        """Return the stored line items, or an empty list."""

    @abstractmethod
    def save(self, items: list[LineItem]) -> None:
        """Overwrite the stored cart with *items*."""
