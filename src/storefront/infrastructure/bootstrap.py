"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from storefront.infrastructure import seed_data
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.local_storage import LocalStorage
from storefront.infrastructure.persistence.session_repositories import (
    StaticUserRepository,
    StoredSessionRepository,
)

DATA_DIR_ENV = "STOREFRONT_DATA_DIR"


def data_dir() -> Path:
    """``$STOREFRONT_DATA_DIR`` if set, else ``data/`` at the repo root."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)
    # When installed in editable mode the project root is the repo root.
    return Path(__file__).resolve().parents[3] / "data"


def local_storage() -> LocalStorage:
    return LocalStorage(data_dir() / "storage.json")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json", seed=seed_data.PRODUCTS)


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(local_storage())


def user_repository() -> StaticUserRepository:
    return StaticUserRepository(seed_data.USERS)


def session_repository() -> StoredSessionRepository:
    return StoredSessionRepository(local_storage())
