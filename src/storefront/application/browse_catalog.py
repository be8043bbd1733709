"""Application service: Browse Catalog use cases (queries)."""

from __future__ import annotations

from storefront.application.dto import CatalogPageDTO, ProductDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import ShoppingCart
from storefront.domain.model.query import QuerySpec
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.catalog_query import query_catalog


class BrowseCatalogHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        cart: ShoppingCart | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._cart = cart

    def handle(self, spec: QuerySpec) -> CatalogPageDTO:
        snapshot = self._product_repo.list_all()
        matches = query_catalog(snapshot, spec)
        return CatalogPageDTO(
            products=[
                ProductDTO.from_product(p, in_cart=self._in_cart(p.id)) for p in matches
            ],
            shown_count=len(matches),
            total_count=len(snapshot),
            active_filter_count=spec.active_filter_count,
            sort_label=spec.sort.label,
        )

    def _in_cart(self, product_id: str) -> bool:
        return self._cart is not None and self._cart.is_in_cart(product_id)


class ShowProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        cart: ShoppingCart | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._cart = cart

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        in_cart = self._cart is not None and self._cart.is_in_cart(product_id)
        return ProductDTO.from_product(product, in_cart=in_cart)
