"""CLI commands for product price and status."""

from __future__ import annotations

import click

from artmarket.application.update_product import UpdateProductHandler
from artmarket.domain.exceptions import DomainException
from artmarket.infrastructure.bootstrap import product_repository


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<8} {'Name':<24} {'Seller':<10} {'Status':<12} {'Price':>10}")
    click.echo("-" * 68)
    for p in products:
        click.echo(f"{p.id:<8} {p.name:<24} {p.seller_id:<10} {p.status:<12} {str(p.price):>10}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--status", default=None, help="New status (e.g. Available, Sold Out).")
def product_update(product_id: str, price: str | None, status: str | None) -> None:
    """Update a product's price and/or status."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id, new_price=price, new_status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}': {product.price}, {product.status}")
