"""Application service: Add To Cart use case.

The cart itself accepts any product; this handler is the caller that
refuses out-of-stock products, the same check the product card and the
product page make before calling the cart.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import ShoppingCart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, product_id: str, quantity: int = 1) -> int:
        """Add a product to the cart and return the new cart item count."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if not product.in_stock:
            raise ValidationError(f"'{product.name}' is out of stock")

        cart = ShoppingCart(self._cart_repo)
        cart.add_item(product, quantity)
        return cart.item_count
