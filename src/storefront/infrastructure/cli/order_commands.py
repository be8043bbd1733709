"""CLI commands for checkout and order history."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import ShippingAddress
from storefront.infrastructure.bootstrap import (
    cart_repository,
    order_repository,
    session_repository,
)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Placed:   {dto.created_at}")
    click.echo(f"Ship to:  {dto.ship_to}")
    click.echo()
    click.echo(f"  {'Product':<38} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-' * 66}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name[:38]:<38} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-' * 66}")
    click.echo(f"  {'Subtotal':<20} {dto.subtotal:>12}")
    click.echo(f"  {'Shipping':<20} {dto.shipping:>12}")
    click.echo(f"  {'Tax':<20} {dto.tax:>12}")
    click.echo(f"  {'Order Total':<20} {dto.total:>12}")


@click.command("checkout")
@click.option("--street", required=True, help="Street address.")
@click.option("--city", required=True, help="City.")
@click.option("--state", required=True, help="State.")
@click.option("--zip", "zip_code", required=True, help="ZIP code.")
@click.option("--country", default="USA", show_default=True, help="Country.")
def order_checkout(street: str, city: str, state: str, zip_code: str, country: str) -> None:
    """Place an order for everything in the cart."""
    handler = PlaceOrderHandler(
        order_repo=order_repository(),
        cart_repo=cart_repository(),
    )
    address = ShippingAddress(
        street=street, city=city, state=state, zip_code=zip_code, country=country
    )

    try:
        dto = handler.handle(session_repository().current_user(), address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order placed. Thank you!")
    click.echo()
    _display_order(dto)


@click.command("list")
def order_list() -> None:
    """List your orders (admins see all orders)."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(session_repository().current_user())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders yet.")
        return

    click.echo(f"{'Order':<10} {'Placed':<22} {'Status':<12} {'Items':>5} {'Total':>12}")
    click.echo("-" * 65)
    for dto in orders:
        click.echo(
            f"{dto.id:<10} {dto.created_at:<22} {dto.status:<12} {dto.item_count:>5} {dto.total:>12}"
        )
