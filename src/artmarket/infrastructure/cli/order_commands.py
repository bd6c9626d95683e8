"""CLI commands for checkout and the Order aggregate."""

from __future__ import annotations

import click

from artmarket.application.dto import OrderDTO, OrderItemSpec
from artmarket.application.order_history import OrderHistoryHandler, SellerOrdersHandler
from artmarket.application.place_order import PlaceOrderHandler
from artmarket.application.place_order_from_cart import PlaceOrderFromCartHandler
from artmarket.application.show_order import ShowOrderHandler
from artmarket.application.update_order_status import UpdateOrderStatusHandler
from artmarket.domain.exceptions import DomainException
from artmarket.domain.model.order import OrderStatus
from artmarket.infrastructure.bootstrap import (
    cart_repository,
    inventory_repository,
    order_repository,
    product_repository,
)

_STATUS_CHOICES = [s.value for s in OrderStatus]


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'p1:3,p2:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Placed:   {dto.placed_at}")
    click.echo(f"Deliver:  {dto.delivery_address}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<31} {dto.total:>20}")


def _display_summaries(dtos: list[OrderDTO]) -> None:
    if not dtos:
        click.echo("No orders found.")
        return
    click.echo(f"{'Order':<8} {'Placed':<22} {'Status':<12} {'Items':>6} {'Total':>12}")
    click.echo("-" * 64)
    for dto in dtos:
        click.echo(
            f"#{dto.id:<7} {dto.placed_at:<22} {dto.status:<12} {dto.item_count:>6} {dto.total:>12}"
        )


@click.command("checkout")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--address", required=True, help="Delivery address.")
@click.option("--payment-token", required=True, help="Simulated payment token.")
def order_checkout(user_id: str, address: str, payment_token: str) -> None:
    """Turn the user's cart into an order."""
    handler = PlaceOrderFromCartHandler(
        order_repo=order_repository(),
        cart_repo=cart_repository(),
        product_repo=product_repository(),
        inventory_repo=inventory_repository(),
    )

    try:
        dto = handler.handle(user_id, address, payment_token)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order placed successfully from cart.")
    _display_order(dto)


@click.command("place")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--address", required=True, help="Delivery address.")
@click.option("--payment-token", required=True, help="Simulated payment token.")
def order_place(user_id: str, items: str, address: str, payment_token: str) -> None:
    """Place an order directly, without using the cart."""
    specs = _parse_items(items)

    handler = PlaceOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        inventory_repo=inventory_repository(),
    )

    try:
        dto = handler.handle(user_id, specs, address, payment_token)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order placed successfully.")
    _display_order(dto)


@click.command("show")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(user_id: str, order_id: int) -> None:
    """Show one of the user's orders."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(user_id, order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("history")
@click.option("--user", "user_id", required=True, help="User ID.")
def order_history(user_id: str) -> None:
    """List the user's orders, newest first."""
    _display_summaries(OrderHistoryHandler(order_repository()).handle(user_id))


@click.command("seller")
@click.option("--seller", "seller_id", required=True, help="Seller ID.")
def order_seller(seller_id: str) -> None:
    """List orders containing the seller's products, newest first."""
    _display_summaries(SellerOrdersHandler(order_repository()).handle(seller_id))


@click.command("status")
@click.option("--seller", "seller_id", required=True, help="Seller ID.")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option(
    "--status",
    "new_status",
    required=True,
    help=f"New status: {', '.join(_STATUS_CHOICES)}.",
)
def order_status(seller_id: str, order_id: int, new_status: str) -> None:
    """Update an order's fulfillment status (seller)."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(seller_id, order_id, new_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} status updated to {dto.status}.")
