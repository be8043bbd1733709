"""Application service: Add Product use case (admin)."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import PermissionDeniedError, ValidationError
from storefront.domain.model.product import Category, Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


def require_admin(user: User | None) -> None:
    if user is None or not user.is_admin:
        raise PermissionDeniedError("Admin access required")


def parse_rating(raw: str | Decimal) -> Decimal:
    try:
        value = Decimal(str(raw))
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid rating: {raw!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid rating: {raw!r}")
    return value


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        user: User | None,
        name: str,
        description: str,
        price: str,
        category: str,
        original_price: str | None = None,
        rating: str = "0",
        review_count: int = 0,
        in_stock: bool = True,
        featured: bool = False,
        image: str = "",
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        require_admin(user)

        product = Product.create(
            id=self._next_id(),
            name=name,
            description=description,
            price=Money.of(price),
            category=Category.from_slug(category),
            original_price=Money.of(original_price) if original_price else None,
            rating=parse_rating(rating),
            review_count=review_count,
            in_stock=in_stock,
            featured=featured,
            image=image,
        )
        self._product_repo.save(product)
        return ProductDTO.from_product(product)

    def _next_id(self) -> str:
        """Next numeric ID, so the newest product sorts first by "newest"."""
        numeric_ids = [int(p.id) for p in self._product_repo.list_all() if p.id.isdigit()]
        return str(max(numeric_ids) + 1) if numeric_ids else "1"
