"""Order aggregate — a placed checkout.

An order is built once from the cart at checkout and captures a price
snapshot of every line, so later catalog edits never change what the
shopper was charged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.service.pricing import PricingPolicy


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ShippingAddress:
    street: str
    city: str
    state: str
    zip_code: str
    country: str = "USA"

    def validate(self) -> None:
        for name in ("street", "city", "state", "zip_code", "country"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValidationError(f"Shipping address {name.replace('_', ' ')} is required")


@dataclass(frozen=True)
class OrderLineItem:
    """Name and unit price locked at checkout time."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.create()`` at checkout.  The ``__init__`` is kept plain
    so the repository can reconstitute persisted orders without
    re-validating them.
    """

    id: str | None
    user_id: str
    items: list[OrderLineItem]
    shipping_address: ShippingAddress
    subtotal: Money
    shipping: Money
    tax: Money
    total: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        user_id: str,
        items: list[OrderLineItem],
        shipping_address: ShippingAddress,
        pricing: PricingPolicy,
    ) -> Order:
        """Create a new order, pricing it with *pricing*."""
        if not user_id or not user_id.strip():
            raise ValidationError("Orders must be attributed to a user")
        if not items:
            raise ValidationError("Order must contain at least one item")
        shipping_address.validate()

        subtotal = Money.zero()
        for item in items:
            subtotal = subtotal + item.line_total
        summary = pricing.summarize(subtotal)

        return Order(
            id=None,
            user_id=user_id,
            items=list(items),
            shipping_address=shipping_address,
            subtotal=summary.subtotal,
            shipping=summary.shipping,
            tax=summary.tax,
            total=summary.total,
        )

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)
