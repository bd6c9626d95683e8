from __future__ import annotations

from pathlib import Path

import click

from artmarket.infrastructure import bootstrap
from artmarket.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_count,
    cart_remove,
    cart_show,
    cart_update,
)
from artmarket.infrastructure.cli.inventory_commands import inventory_set, inventory_show
from artmarket.infrastructure.cli.order_commands import (
    order_checkout,
    order_history,
    order_place,
    order_seller,
    order_show,
    order_status,
)
from artmarket.infrastructure.cli.product_commands import product_list, product_update
from artmarket.infrastructure.config import ConfigurationError, Settings
from artmarket.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the JSON data files (overrides ARTMARKET_DATA_DIR).",
)
def cli(data_dir: Path | None) -> None:
    """artmarket: carts, checkout and order fulfillment."""
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    if data_dir is not None:
        settings = settings.with_data_dir(data_dir)
    bootstrap.use_settings(settings)
    configure_logging(settings)


@cli.group()
def cart() -> None:
    """Manage a user's cart."""


@cli.group()
def order() -> None:
    """Check out, view and fulfill orders."""


@cli.group()
def product() -> None:
    """Manage product price and status."""


@cli.group()
def inventory() -> None:
    """Manage inventory."""


# Register subcommands
cart.add_command(cart_show)
cart.add_command(cart_add)
cart.add_command(cart_update)
cart.add_command(cart_remove)
cart.add_command(cart_clear)
cart.add_command(cart_count)
order.add_command(order_checkout)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_history)
order.add_command(order_seller)
order.add_command(order_status)
product.add_command(product_list)
product.add_command(product_update)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
