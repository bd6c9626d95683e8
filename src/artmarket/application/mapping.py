"""Domain -> DTO mapping shared by the cart and order use cases."""

from __future__ import annotations

from artmarket.application.dto import CartDTO, CartItemDTO, OrderDTO, OrderLineDTO
from artmarket.domain.model.cart import Cart
from artmarket.domain.model.order import Order
from artmarket.domain.repository.product_repository import ProductRepository


def cart_to_dto(cart: Cart, product_repo: ProductRepository) -> CartDTO:
    """Cart lines show the current product name next to the as-added price."""
    items = []
    for item in cart.items:
        product = product_repo.get_by_id(item.product_id)
        items.append(
            CartItemDTO(
                product_id=item.product_id,
                product_name=product.name if product is not None else item.product_id,
                quantity=item.quantity.value,
                price_snapshot=str(item.price_snapshot),
                line_total=str(item.line_total),
            )
        )
    return CartDTO(
        user_id=cart.user_id,
        items=items,
        total=str(cart.total),
        item_count=cart.item_count,
    )


def order_to_dto(order: Order, include_items: bool = True) -> OrderDTO:
    items = []
    if include_items:
        items = [
            OrderLineDTO(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in order.lines
        ]
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        total=str(order.total),
        placed_at=order.placed_at.strftime("%Y-%m-%d %H:%M UTC"),
        delivery_address=order.delivery_address,
        item_count=order.item_count,
        items=items,
    )
