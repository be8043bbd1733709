"""Product aggregate and the fixed category set.

Products are read-only from the cart's and the catalog engine's point of
view.  Admin edits never mutate a product in place; they build a revised
copy that replaces the catalog entry wholesale.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


class Category(Enum):
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    HOME = "home"
    SPORTS = "sports"
    BOOKS = "books"
    BEAUTY = "beauty"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @staticmethod
    def from_slug(slug: str) -> Category:
        try:
            return Category(slug.strip().lower())
        except ValueError as exc:
            raise ValidationError(f"Unknown category: {slug!r}") from exc


_CATEGORY_LABELS = {
    Category.ELECTRONICS: "Electronics",
    Category.CLOTHING: "Clothing",
    Category.HOME: "Home & Living",
    Category.SPORTS: "Sports & Outdoors",
    Category.BOOKS: "Books",
    Category.BEAUTY: "Beauty",
}

# ---------------------------------------------------------------------------
# Constants for catalog rules
# ---------------------------------------------------------------------------
MAX_NAME_LENGTH = 100
MIN_DESCRIPTION_LENGTH = 10
MAX_DESCRIPTION_LENGTH = 1000
MAX_RATING = Decimal("5")


@dataclass(frozen=True)
class Product:
    """A product in the catalog snapshot.

    Use ``Product.create()`` for products entered through the admin
    screens or loaded from seed data.  The plain constructor performs no
    validation so persisted records and test fixtures can be rebuilt
    as-is.
    """

    id: str
    name: str
    description: str
    price: Money
    category: Category
    original_price: Money | None = None
    rating: Decimal = Decimal("0")
    review_count: int = 0
    in_stock: bool = True
    featured: bool = False
    image: str = ""

    @staticmethod
    def create(
        id: str,
        name: str,
        description: str,
        price: Money,
        category: Category,
        original_price: Money | None = None,
        rating: Decimal = Decimal("0"),
        review_count: int = 0,
        in_stock: bool = True,
        featured: bool = False,
        image: str = "",
    ) -> Product:
        """Create a product, enforcing all catalog rules."""
        product = Product(
            id=id,
            name=name.strip() if name else name,
            description=description.strip() if description else description,
            price=price,
            category=category,
            original_price=original_price,
            rating=rating,
            review_count=review_count,
            in_stock=in_stock,
            featured=featured,
            image=image,
        )
        product._validate()
        return product

    def revise(self, **changes) -> Product:
        """Return a validated copy with the given fields replaced."""
        if "id" in changes and changes["id"] != self.id:
            raise ValidationError("Product ID cannot be changed")
        revised = replace(self, **changes)
        revised._validate()
        return revised

    # --- Computed properties --------------------------------------------------

    @property
    def discount_percent(self) -> int:
        """Whole-percent markdown from the original price, 0 if none."""
        if self.original_price is None or self.original_price.amount == 0:
            return 0
        ratio = (self.original_price.amount - self.price.amount) / self.original_price.amount
        return int((ratio * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    # --- Internal helpers -----------------------------------------------------

    def _validate(self) -> None:
        if not self.id or not str(self.id).strip():
            raise ValidationError("Product ID is required")
        if not self.name:
            raise ValidationError("Product name is required")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValidationError(f"Product name longer than {MAX_NAME_LENGTH} characters")
        if not self.description or len(self.description) < MIN_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters"
            )
        if len(self.description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Description longer than {MAX_DESCRIPTION_LENGTH} characters"
            )
        if self.price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        if self.original_price is not None and self.original_price < self.price:
            raise ValidationError(
                f"Original price {self.original_price} is below price {self.price}"
            )
        if not self.rating.is_finite() or not Decimal("0") <= self.rating <= MAX_RATING:
            raise ValidationError("Rating must be between 0 and 5")
        if self.review_count < 0:
            raise ValidationError("Review count cannot be negative")
