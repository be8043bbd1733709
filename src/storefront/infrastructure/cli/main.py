import logging

import click

from storefront.infrastructure.cli.admin_commands import (
    product_add,
    product_delete,
    product_update,
)
from storefront.infrastructure.cli.auth_commands import (
    auth_login,
    auth_logout,
    auth_register,
    auth_whoami,
)
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.catalog_commands import products_list, products_show
from storefront.infrastructure.cli.order_commands import order_checkout, order_list


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Storefront — catalog, cart and checkout"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def products() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def auth() -> None:
    """Log in and out."""


@cli.group()
def order() -> None:
    """Check out and view orders."""


@cli.group()
def admin() -> None:
    """Maintain the catalog (admin only)."""


# Register subcommands
products.add_command(products_list)
products.add_command(products_show)
cart.add_command(cart_add)
cart.add_command(cart_update)
cart.add_command(cart_remove)
cart.add_command(cart_clear)
cart.add_command(cart_show)
auth.add_command(auth_login)
auth.add_command(auth_register)
auth.add_command(auth_logout)
auth.add_command(auth_whoami)
order.add_command(order_checkout)
order.add_command(order_list)
admin.add_command(product_add)
admin.add_command(product_update)
admin.add_command(product_delete)
