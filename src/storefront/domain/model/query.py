"""Catalog query specification.

A ``QuerySpec`` is the normalized form of the search box, the category
checkboxes, the availability toggle and the sort dropdown.  Building one
never fails: unknown sort keys fall back to featured-first and empty
values mean "no restriction".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


class SortKey(Enum):
    FEATURED = "featured"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    RATING = "rating"
    NEWEST = "newest"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]

    @staticmethod
    def parse(raw: str | SortKey | None) -> SortKey:
        """Resolve a sort key, defaulting to FEATURED for anything unknown."""
        if isinstance(raw, SortKey):
            return raw
        if not raw:
            return SortKey.FEATURED
        try:
            return SortKey(raw.strip().lower())
        except ValueError:
            logger.debug("Unknown sort key %r, using featured", raw)
            return SortKey.FEATURED


_SORT_LABELS = {
    SortKey.FEATURED: "Featured",
    SortKey.PRICE_ASC: "Price: Low to High",
    SortKey.PRICE_DESC: "Price: High to Low",
    SortKey.RATING: "Highest Rated",
    SortKey.NEWEST: "Newest",
}

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class QuerySpec:
    search: str = ""
    categories: frozenset[str] = field(default_factory=frozenset)
    in_stock_only: bool = False
    featured_only: bool = False
    sort: SortKey = SortKey.FEATURED

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", frozenset(self.categories))
        object.__setattr__(self, "sort", SortKey.parse(self.sort))

    @staticmethod
    def build(
        search: str | None = None,
        categories: Iterable[str] | None = None,
        in_stock_only: bool = False,
        featured_only: bool = False,
        sort: str | SortKey | None = None,
    ) -> QuerySpec:
        """Normalize loose UI values into a spec."""
        return QuerySpec(
            search=(search or "").strip(),
            categories=frozenset(c.strip().lower() for c in categories or () if c.strip()),
            in_stock_only=bool(in_stock_only),
            featured_only=bool(featured_only),
            sort=SortKey.parse(sort),
        )

    @staticmethod
    def from_params(params: Mapping[str, str]) -> QuerySpec:
        """Build a spec from URL query parameters.

        Recognised keys: ``search``, ``category`` (comma separated),
        ``featured`` and ``in_stock`` (``true``/``1``), ``sort``.
        """
        raw_categories = params.get("category") or ""
        return QuerySpec.build(
            search=params.get("search"),
            categories=raw_categories.split(","),
            in_stock_only=(params.get("in_stock") or "").lower() in _TRUTHY,
            featured_only=(params.get("featured") or "").lower() in _TRUTHY,
            sort=params.get("sort"),
        )

    @property
    def active_filter_count(self) -> int:
        """Filters shown as removable badges: categories, stock, search."""
        return len(self.categories) + int(self.in_stock_only) + int(bool(self.search))
