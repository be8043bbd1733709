"""LocalStorage-backed implementation of CartRepository.

The cart is stored under ``CART_STORAGE_KEY`` as a JSON array of
``{"product": {...}, "quantity": n}`` records with the full product
embedded.  Reading is fail-soft: anything that does not parse back into
valid line items yields an empty cart.  Writing is best-effort.
"""

from __future__ import annotations

import json
import logging
from decimal import InvalidOperation

from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import LineItem
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CART_STORAGE_KEY, CartRepository
from storefront.infrastructure.persistence.local_storage import LocalStorage
from storefront.infrastructure.persistence.serialization import (
    product_from_raw,
    product_to_raw,
)

logger = logging.getLogger(__name__)


class JsonCartRepository(CartRepository):

    def __init__(self, storage: LocalStorage, key: str = CART_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> list[LineItem]:
        payload = self._storage.get(self._key)
        if payload is None:
            return []
        try:
            return self.deserialize(payload)
        except (
            ValueError,
            KeyError,
            TypeError,
            InvalidOperation,
            DomainException,
        ) as exc:
            logger.warning("Discarding unreadable saved cart: %s", exc)
            return []

    def save(self, items: list[LineItem]) -> None:
        try:
            self._storage.set(self._key, self.serialize(items))
        except OSError as exc:
            logger.warning("Could not save cart: %s", exc)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def serialize(items: list[LineItem]) -> str:
        return json.dumps(
            [
                {"product": product_to_raw(item.product), "quantity": item.quantity.value}
                for item in items
            ]
        )

    @staticmethod
    def deserialize(payload: str) -> list[LineItem]:
        records = json.loads(payload)
        if not isinstance(records, list):
            raise TypeError("saved cart is not a list")
        items = []
        for record in records:
            if not isinstance(record, dict) or not isinstance(record.get("product"), dict):
                raise TypeError(f"malformed cart record: {record!r}")
            items.append(
                LineItem(
                    product=product_from_raw(record["product"]),
                    quantity=Quantity(record["quantity"]),
                )
            )
        return items
