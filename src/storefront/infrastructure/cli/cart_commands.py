"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart import (
    ClearCartHandler,
    RemoveFromCartHandler,
    UpdateCartItemHandler,
)
from storefront.domain.exceptions import DomainException
from storefront.domain.service.pricing import DEFAULT_PRICING_POLICY
from storefront.infrastructure.bootstrap import cart_repository, product_repository


@click.command("add")
@click.argument("product_id")
@click.option("--quantity", "-q", default=1, type=int, show_default=True, help="Units to add.")
def cart_add(product_id: str, quantity: int) -> None:
    """Add a product to the cart (merges with an existing line)."""
    handler = AddToCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )

    try:
        count = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added to cart. Cart now holds {count} {'item' if count == 1 else 'items'}.")


@click.command("update")
@click.argument("product_id")
@click.argument("quantity", type=int)
def cart_update(product_id: str, quantity: int) -> None:
    """Set a line's quantity (0 or less removes it)."""
    handler = UpdateCartItemHandler(cart_repo=cart_repository())
    count = handler.handle(product_id, quantity)
    click.echo(f"Cart now holds {count} {'item' if count == 1 else 'items'}.")


@click.command("remove")
@click.argument("product_id")
def cart_remove(product_id: str) -> None:
    """Remove a product from the cart."""
    handler = RemoveFromCartHandler(cart_repo=cart_repository())
    if handler.handle(product_id):
        click.echo(f"Product #{product_id} removed from cart.")
    else:
        click.echo(f"Product #{product_id} was not in the cart.")


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    ClearCartHandler(cart_repo=cart_repository()).handle()
    click.echo("Cart cleared.")


@click.command("show")
def cart_show() -> None:
    """Show cart contents and the order summary."""
    dto = ShowCartHandler(cart_repo=cart_repository()).handle()

    if not dto.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"{dto.item_count} {'item' if dto.item_count == 1 else 'items'} in your cart")
    click.echo()
    click.echo(f"  {'ID':<5} {'Product':<38} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-' * 72}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_id:<5} {line.product_name[:38]:<38} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-' * 72}")

    summary = dto.summary
    click.echo(f"  {'Subtotal':<20} {summary.subtotal:>12}")
    click.echo(f"  {'Shipping':<20} {summary.shipping:>12}")
    tax_label = f"Tax ({DEFAULT_PRICING_POLICY.tax_rate * 100:.0f}%)"
    click.echo(f"  {tax_label:<20} {summary.tax:>12}")
    click.echo(f"  {'Total':<20} {summary.total:>12}")
    if summary.amount_to_free_shipping:
        click.echo(f"  Add {summary.amount_to_free_shipping} more for free shipping")
