"""Raw dict <-> Product mapping shared by the catalog and cart stores.

Prices are written as decimal strings so a round trip never loses
precision.  Reading accepts plain JSON numbers too.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money


def product_to_raw(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": str(product.price.amount),
        "original_price": (
            str(product.original_price.amount) if product.original_price else None
        ),
        "currency": product.price.currency,
        "category": product.category.value,
        "rating": str(product.rating),
        "review_count": product.review_count,
        "in_stock": product.in_stock,
        "featured": product.featured,
        "image": product.image,
    }


def _finite_decimal(value) -> Decimal:
    number = Decimal(str(value))
    if not number.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return number


def product_from_raw(raw: dict) -> Product:
    """Rebuild a Product.

    Raises KeyError, TypeError, ValueError, decimal.InvalidOperation or
    ValidationError for malformed records.
    """
    currency = raw.get("currency", "USD")
    original = raw.get("original_price")
    return Product(
        id=str(raw["id"]),
        name=raw["name"],
        description=raw.get("description", ""),
        price=Money(Decimal(str(raw["price"])), currency),
        original_price=Money(Decimal(str(original)), currency) if original is not None else None,
        category=Category(raw["category"]),
        rating=_finite_decimal(raw.get("rating", "0")),
        review_count=int(raw.get("review_count", 0)),
        in_stock=bool(raw.get("in_stock", True)),
        featured=bool(raw.get("featured", False)),
        image=raw.get("image", ""),
    )
