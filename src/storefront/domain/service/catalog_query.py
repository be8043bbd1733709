"""Domain service: Catalog Query.

Filters and sorts a catalog snapshot according to a ``QuerySpec``.  The
stages always run in the same order (text, category, featured, stock,
then a single sort) and always start again from the full snapshot, so
the same snapshot and spec give the same result on every call.

Every sort here is stable: products that compare equal keep their
relative order from the snapshot.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from storefront.domain.model.product import Product
from storefront.domain.model.query import QuerySpec, SortKey


def query_catalog(products: Iterable[Product], spec: QuerySpec) -> list[Product]:
    """Return the products matching *spec*, in display order."""
    result = list(products)

    if spec.search:
        term = spec.search.lower()
        result = [p for p in result if _matches_text(p, term)]

    if spec.categories:
        result = [p for p in result if p.category.value in spec.categories]

    if spec.featured_only:
        result = [p for p in result if p.featured]

    if spec.in_stock_only:
        result = [p for p in result if p.in_stock]

    key, descending = _SORTS.get(spec.sort, _SORTS[SortKey.FEATURED])
    # sorted() is stable, including with reverse=True
    return sorted(result, key=key, reverse=descending)


def _matches_text(product: Product, term: str) -> bool:
    return (
        term in product.name.lower()
        or term in product.description.lower()
        or term in product.category.value
    )


def _age_rank(product: Product) -> int:
    """Numeric id; higher is newer.  Non-numeric ids rank as oldest."""
    try:
        return int(product.id)
    except ValueError:
        return -1


_SORTS: dict[SortKey, tuple[Callable[[Product], object], bool]] = {
    SortKey.FEATURED: (lambda p: not p.featured, False),
    SortKey.PRICE_ASC: (lambda p: p.price.amount, False),
    SortKey.PRICE_DESC: (lambda p: p.price.amount, True),
    SortKey.RATING: (lambda p: p.rating, True),
    SortKey.NEWEST: (_age_rank, True),
}
