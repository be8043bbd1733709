"""CLI commands for admin catalog maintenance."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.update_product import DeleteProductHandler, UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import Category
from storefront.infrastructure.bootstrap import product_repository, session_repository

_CATEGORY_CHOICE = click.Choice([c.value for c in Category])


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="At least 10 characters.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", required=True, type=_CATEGORY_CHOICE, help="Category slug.")
@click.option("--original-price", default=None, help="Price before discount.")
@click.option("--rating", default="0", show_default=True, help="0 to 5.")
@click.option("--reviews", default=0, type=int, show_default=True, help="Review count.")
@click.option("--in-stock/--out-of-stock", default=True, show_default=True)
@click.option("--featured/--not-featured", default=False, show_default=True)
@click.option("--image", default="", help="Image reference.")
def product_add(
    name: str,
    description: str,
    price: str,
    category: str,
    original_price: str | None,
    rating: str,
    reviews: int,
    in_stock: bool,
    featured: bool,
    image: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            session_repository().current_user(),
            name=name,
            description=description,
            price=price,
            category=category,
            original_price=original_price,
            rating=rating,
            review_count=reviews,
            in_stock=in_stock,
            featured=featured,
            image=image,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.argument("product_id")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--category", default=None, type=_CATEGORY_CHOICE, help="New category.")
@click.option("--original-price", default=None, help="New original price ('' clears it).")
@click.option("--rating", default=None, help="New rating.")
@click.option("--reviews", default=None, type=int, help="New review count.")
@click.option("--in-stock", type=click.BOOL, default=None, help="true/false.")
@click.option("--featured", type=click.BOOL, default=None, help="true/false.")
@click.option("--image", default=None, help="New image reference.")
def product_update(product_id: str, **fields) -> None:
    """Edit a product; unspecified fields keep their value."""
    handler = UpdateProductHandler(product_repo=product_repository())
    fields["review_count"] = fields.pop("reviews")

    try:
        product = handler.handle(session_repository().current_user(), product_id, **fields)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' updated ({product.price})")


@click.command("delete")
@click.argument("product_id")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(session_repository().current_user(), product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
