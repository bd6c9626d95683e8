"""CLI commands for inventory management."""

from __future__ import annotations

import click

from artmarket.application.set_inventory import SetInventoryHandler
from artmarket.application.show_inventory import ShowInventoryHandler
from artmarket.domain.exceptions import DomainException
from artmarket.infrastructure.bootstrap import inventory_repository, product_repository


@click.command("set")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", type=int, default=None, help="Quantity on hand.")
@click.option("--unlimited", is_flag=True, default=False, help="Never runs out (digital goods).")
def inventory_set(product_id: str, quantity: int | None, unlimited: bool) -> None:
    """Set inventory level for a product."""
    handler = SetInventoryHandler(
        inventory_repo=inventory_repository(),
        product_repo=product_repository(),
    )

    try:
        record = handler.handle(product_id=product_id, quantity=quantity, unlimited=unlimited)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if record.unlimited:
        click.echo(f"Inventory for '{product_id}' set to unlimited")
    else:
        click.echo(f"Inventory for '{product_id}' set to {record.quantity_on_hand}")


@click.command("show")
def inventory_show() -> None:
    """Show current inventory levels."""
    handler = ShowInventoryHandler(inventory_repository(), product_repository())
    lines = handler.handle()

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'Product':<24} {'On hand':>8} {'Reserved':>10} {'Available':>10}")
    click.echo("-" * 55)
    for line in lines:
        click.echo(
            f"{line.product_name:<24} {line.on_hand:>8} {line.reserved:>10} {line.available:>10}"
        )
