"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, CartLineDTO, PriceSummaryDTO
from storefront.domain.model.cart import ShoppingCart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.service.pricing import DEFAULT_PRICING_POLICY, PricingPolicy


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        pricing: PricingPolicy = DEFAULT_PRICING_POLICY,
    ) -> None:
        self._cart_repo = cart_repo
        self._pricing = pricing

    def handle(self) -> CartDTO:
        cart = ShoppingCart(self._cart_repo)
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_id=line.product_id,
                    product_name=line.product.name,
                    quantity=line.quantity.value,
                    unit_price=str(line.product.price),
                    line_total=str(line.line_total),
                )
                for line in cart.items
            ],
            item_count=cart.item_count,
            summary=PriceSummaryDTO.from_summary(self._pricing.summarize(cart.subtotal)),
        )
