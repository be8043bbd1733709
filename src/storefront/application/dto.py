"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry already-formatted values to the CLI so presentation never
touches domain objects or does its own rounding.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.service.pricing import PriceSummary


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    category: str
    category_label: str
    price: str  # formatted, e.g. "$15.00"
    original_price: str | None
    discount_percent: int
    rating: str
    review_count: int
    in_stock: bool
    featured: bool
    in_cart: bool = False

    @staticmethod
    def from_product(product: Product, in_cart: bool = False) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            category=product.category.value,
            category_label=product.category.label,
            price=str(product.price),
            original_price=str(product.original_price) if product.original_price else None,
            discount_percent=product.discount_percent,
            rating=f"{product.rating:.1f}",
            review_count=product.review_count,
            in_stock=product.in_stock,
            featured=product.featured,
            in_cart=in_cart,
        )


@dataclass(frozen=True)
class CatalogPageDTO:
    """Output: one page of catalog results."""

    products: list[ProductDTO]
    shown_count: int
    total_count: int
    active_filter_count: int
    sort_label: str


@dataclass(frozen=True)
class PriceSummaryDTO:
    subtotal: str
    shipping: str  # "Free" when waived
    tax: str
    total: str
    amount_to_free_shipping: str | None

    @staticmethod
    def from_summary(summary: PriceSummary) -> PriceSummaryDTO:
        return PriceSummaryDTO(
            subtotal=str(summary.subtotal),
            shipping="Free" if summary.free_shipping else str(summary.shipping),
            tax=str(summary.tax),
            total=str(summary.total),
            amount_to_free_shipping=(
                None if summary.free_shipping else str(summary.amount_to_free_shipping)
            ),
        )


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the cart as displayed on the cart page."""

    lines: list[CartLineDTO]
    item_count: int
    summary: PriceSummaryDTO


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order as displayed to the user."""

    id: str
    user_id: str
    status: str
    items: list[OrderLineItemDTO]
    item_count: int
    subtotal: str
    shipping: str
    tax: str
    total: str
    ship_to: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            user_id=order.user_id,
            status=order.status.value,
            items=[
                OrderLineItemDTO(
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            item_count=order.item_count,
            subtotal=str(order.subtotal),
            shipping=str(order.shipping),
            tax=str(order.tax),
            total=str(order.total),
            ship_to=f"{order.shipping_address.city}, {order.shipping_address.state}",
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
