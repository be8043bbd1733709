"""Application service: Place Order (checkout) use case.

Turns the session cart into an Order attributed to the logged-in user,
priced with the same policy as the cart summary, then empties the cart.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import AuthenticationRequiredError, ValidationError
from storefront.domain.model.cart import ShoppingCart
from storefront.domain.model.order import Order, OrderLineItem, ShippingAddress
from storefront.domain.model.user import User
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.pricing import DEFAULT_PRICING_POLICY, PricingPolicy

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
        pricing: PricingPolicy = DEFAULT_PRICING_POLICY,
    ) -> None:
        self._order_repo = order_repo
        self._cart_repo = cart_repo
        self._pricing = pricing

    def handle(self, user: User | None, address: ShippingAddress) -> OrderDTO:
        if user is None:
            raise AuthenticationRequiredError("Please log in to check out")

        cart = ShoppingCart(self._cart_repo)
        if cart.is_empty:
            raise ValidationError("Your cart is empty")

        items = [
            OrderLineItem(
                product_id=line.product_id,
                product_name=line.product.name,
                quantity=line.quantity,
                unit_price=line.product.price,  # <-- price snapshot
            )
            for line in cart.items
        ]
        order = Order.create(
            user_id=user.id,
            items=items,
            shipping_address=address,
            pricing=self._pricing,
        )
        self._order_repo.save(order)
        cart.clear()

        logger.info("Order %s placed by user %s for %s", order.id, user.id, order.total)
        return OrderDTO.from_order(order)
