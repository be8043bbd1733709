"""Application services: Update and Delete Product use cases (admin).

Edits replace the catalog entry wholesale.  Carts that already hold the
product keep the copy they embedded when it was added.
"""

from __future__ import annotations

from typing import Any

from storefront.application.add_product import parse_rating, require_admin
from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Category
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, user: User | None, product_id: str, **fields: Any) -> ProductDTO:
        """Update the given fields of a product.

        Accepts the same raw field values as ``AddProductHandler``; fields
        passed as ``None`` are left unchanged.
        """
        require_admin(user)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        changes = {key: value for key, value in fields.items() if value is not None}
        if "price" in changes:
            changes["price"] = Money.of(changes["price"])
        if "original_price" in changes:
            raw = changes["original_price"]
            changes["original_price"] = Money.of(raw) if raw != "" else None
        if "category" in changes:
            changes["category"] = Category.from_slug(changes["category"])
        if "rating" in changes:
            changes["rating"] = parse_rating(changes["rating"])

        revised = product.revise(**changes)
        self._product_repo.save(revised)
        return ProductDTO.from_product(revised)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, user: User | None, product_id: str) -> None:
        require_admin(user)
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
