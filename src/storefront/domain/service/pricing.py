"""Domain service: order pricing.

Shipping and tax are derived from the cart subtotal by a fixed policy.
The cart summary and checkout must both go through ``PricingPolicy`` so
the totals a shopper sees are the totals the order records.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class PriceSummary:
    subtotal: Money
    shipping: Money
    tax: Money
    total: Money
    amount_to_free_shipping: Money

    @property
    def free_shipping(self) -> bool:
        return self.shipping.amount == 0


@dataclass(frozen=True)
class PricingPolicy:
    """Flat-rate shipping and tax configuration."""

    free_shipping_threshold: Money = Money(Decimal("50.00"))
    flat_shipping_fee: Money = Money(Decimal("9.99"))
    tax_rate: Decimal = Decimal("0.08")

    def shipping_for(self, subtotal: Money) -> Money:
        if subtotal >= self.free_shipping_threshold:
            return Money.zero()
        return self.flat_shipping_fee

    def tax_for(self, subtotal: Money) -> Money:
        return subtotal * self.tax_rate

    def summarize(self, subtotal: Money) -> PriceSummary:
        shipping = self.shipping_for(subtotal)
        tax = self.tax_for(subtotal)
        if shipping.amount > 0:
            remaining = self.free_shipping_threshold - subtotal
        else:
            remaining = Money.zero()
        return PriceSummary(
            subtotal=subtotal,
            shipping=shipping,
            tax=tax,
            total=subtotal + shipping + tax,
            amount_to_free_shipping=remaining,
        )


DEFAULT_PRICING_POLICY = PricingPolicy()
