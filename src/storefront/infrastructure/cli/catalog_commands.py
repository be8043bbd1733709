"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.application.browse_catalog import BrowseCatalogHandler, ShowProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import ShoppingCart
from storefront.domain.model.product import Category
from storefront.domain.model.query import QuerySpec, SortKey
from storefront.infrastructure.bootstrap import cart_repository, product_repository


@click.command("list")
@click.option("--search", default="", help="Match name, description or category.")
@click.option(
    "--category",
    "categories",
    multiple=True,
    type=click.Choice([c.value for c in Category]),
    help="Restrict to a category (repeatable).",
)
@click.option("--in-stock", is_flag=True, default=False, help="Only products in stock.")
@click.option("--featured", is_flag=True, default=False, help="Only featured products.")
@click.option(
    "--sort",
    default=SortKey.FEATURED.value,
    show_default=True,
    help="One of: " + ", ".join(f"{k.value} ({k.label})" for k in SortKey) + ".",
)
def products_list(
    search: str,
    categories: tuple[str, ...],
    in_stock: bool,
    featured: bool,
    sort: str,
) -> None:
    """List catalog products matching the filters."""
    spec = QuerySpec.build(
        search=search,
        categories=categories,
        in_stock_only=in_stock,
        featured_only=featured,
        sort=sort,
    )
    handler = BrowseCatalogHandler(
        product_repo=product_repository(),
        cart=ShoppingCart(cart_repository()),
    )
    page = handler.handle(spec)

    click.echo(
        f"Showing {page.shown_count} of {page.total_count} products"
        f" (sorted by {page.sort_label})"
    )
    if page.active_filter_count:
        click.echo(f"Active filters: {page.active_filter_count}")
    if not page.products:
        click.echo("No products found matching your criteria.")
        return

    click.echo()
    click.echo(f"{'ID':<5} {'Name':<38} {'Category':<18} {'Price':>10} {'Rating':>6}  Flags")
    click.echo("-" * 90)
    for p in page.products:
        flags = []
        if p.featured:
            flags.append("featured")
        if not p.in_stock:
            flags.append("out of stock")
        if p.discount_percent > 0:
            flags.append(f"-{p.discount_percent}%")
        if p.in_cart:
            flags.append("in cart")
        click.echo(
            f"{p.id:<5} {p.name[:38]:<38} {p.category_label:<18} {p.price:>10} {p.rating:>6}  "
            + ", ".join(flags)
        )


@click.command("show")
@click.argument("product_id")
def products_show(product_id: str) -> None:
    """Show one product."""
    handler = ShowProductHandler(
        product_repo=product_repository(),
        cart=ShoppingCart(cart_repository()),
    )

    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{p.name}  (#{p.id}, {p.category_label})")
    click.echo(p.description)
    click.echo()
    price_line = f"Price: {p.price}"
    if p.original_price:
        price_line += f"  (was {p.original_price}, -{p.discount_percent}%)"
    click.echo(price_line)
    click.echo(f"Rating: {p.rating} ({p.review_count} reviews)")
    click.echo("In stock" if p.in_stock else "Out of stock")
    if p.in_cart:
        click.echo("Already in your cart")
