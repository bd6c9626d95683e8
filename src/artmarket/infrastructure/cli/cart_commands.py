"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from artmarket.application.add_to_cart import AddToCartHandler
from artmarket.application.cart_item_count import CartItemCountHandler
from artmarket.application.clear_cart import ClearCartHandler
from artmarket.application.dto import CartDTO
from artmarket.application.remove_from_cart import RemoveFromCartHandler
from artmarket.application.show_cart import ShowCartHandler
from artmarket.application.update_cart_item import UpdateCartItemHandler
from artmarket.domain.exceptions import DomainException
from artmarket.infrastructure.bootstrap import (
    cart_repository,
    inventory_repository,
    product_repository,
)

user_option = click.option("--user", "user_id", required=True, help="User ID.")
product_option = click.option("--product", "product_id", required=True, help="Product ID.")


def _display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo(f"Cart for user {dto.user_id} is empty.")
        return

    click.echo(f"Cart for user {dto.user_id}  ({dto.item_count} items)")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} "
            f"{item.price_snapshot:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Cart Total':<31} {dto.total:>20}")


@click.command("show")
@user_option
def cart_show(user_id: str) -> None:
    """Show the user's cart."""
    handler = ShowCartHandler(cart_repository(), product_repository())
    _display_cart(handler.handle(user_id))


@click.command("add")
@user_option
@product_option
@click.option("--quantity", type=int, default=1, show_default=True, help="Units to add.")
def cart_add(user_id: str, product_id: str, quantity: int) -> None:
    """Add a product to the cart (or increase its quantity)."""
    handler = AddToCartHandler(cart_repository(), product_repository(), inventory_repository())

    try:
        dto = handler.handle(user_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("update")
@user_option
@product_option
@click.option("--quantity", type=int, required=True, help="New quantity for the line.")
def cart_update(user_id: str, product_id: str, quantity: int) -> None:
    """Set the quantity of a product already in the cart."""
    handler = UpdateCartItemHandler(
        cart_repository(), product_repository(), inventory_repository()
    )

    try:
        dto = handler.handle(user_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("remove")
@user_option
@product_option
def cart_remove(user_id: str, product_id: str) -> None:
    """Remove a product from the cart."""
    handler = RemoveFromCartHandler(cart_repository(), product_repository())

    try:
        dto = handler.handle(user_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("clear")
@user_option
def cart_clear(user_id: str) -> None:
    """Empty the cart."""
    ClearCartHandler(cart_repository(), product_repository()).handle(user_id)
    click.echo(f"Cart for user {user_id} cleared.")


@click.command("count")
@user_option
def cart_count(user_id: str) -> None:
    """Print the number of units in the cart."""
    click.echo(CartItemCountHandler(cart_repository()).handle(user_id))
