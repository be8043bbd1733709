"""Application services: Update, Remove and Clear cart use cases.

None of these fail for a product that is not in the cart; a repeated
click on "remove" or "-" is simply a no-op.
"""

from __future__ import annotations

from storefront.domain.model.cart import ShoppingCart
from storefront.domain.repository.cart_repository import CartRepository


class UpdateCartItemHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, product_id: str, quantity: int) -> int:
        """Set a line's quantity (<= 0 removes it); returns the item count."""
        cart = ShoppingCart(self._cart_repo)
        cart.update_quantity(product_id, quantity)
        return cart.item_count


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, product_id: str) -> bool:
        """Remove a line. Returns whether the product had been in the cart."""
        cart = ShoppingCart(self._cart_repo)
        was_in_cart = cart.is_in_cart(product_id)
        cart.remove_item(product_id)
        return was_in_cart


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self) -> None:
        ShoppingCart(self._cart_repo).clear()
