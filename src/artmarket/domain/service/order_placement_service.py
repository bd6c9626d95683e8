"""Domain service: Order Conversion Engine.

Turns a list of requested lines into an Order:

1. re-fetch each product (authoritative name, price, status)
2. re-check stock, then take it off the shelf with an atomic decrement
3. snapshot name, unit price and seller onto an immutable OrderLine

Lines are processed in the order given, which for checkout is the
cart's insertion order. Every decrement is registered on the caller's
CompensationLog, so a failure on a later line puts back the stock
taken for earlier ones.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from artmarket.domain.exceptions import (
    EntityNotFoundError,
    ProductUnavailableError,
    ValidationError,
)
from artmarket.domain.model.order import Order, OrderLine
from artmarket.domain.model.value_objects import Quantity
from artmarket.domain.repository.inventory_repository import InventoryRepository
from artmarket.domain.repository.product_repository import ProductRepository
from artmarket.domain.service.compensation import CompensationLog
from artmarket.domain.service.inventory_ledger import InventoryLedger

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LineRequest:
    product_id: str
    quantity: int


class OrderPlacementService:

    def __init__(
        self,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._ledger = InventoryLedger(inventory_repo)

    def convert(
        self,
        user_id: str,
        delivery_address: str,
        requests: list[LineRequest],
        compensation: CompensationLog,
    ) -> Order:
        """Build an unsaved Order, decrementing stock line by line."""
        if not requests:
            raise ValidationError("Order must contain at least one item")
        if not delivery_address or not delivery_address.strip():
            raise ValidationError("Delivery address is required")

        lines: list[OrderLine] = []
        for request in requests:
            lines.append(self._take_line(request, compensation))

        order = Order.place(user_id, delivery_address, lines)
        logger.info(
            "Order converted",
            user_id=user_id,
            lines=len(lines),
            total=str(order.total),
        )
        return order

    def _take_line(self, request: LineRequest, compensation: CompensationLog) -> OrderLine:
        quantity = Quantity(request.quantity)

        product = self._product_repo.get_by_id(request.product_id)
        if product is None:
            raise EntityNotFoundError(
                f"Product not found with ID: {request.product_id}"
            )
        if not product.is_available:
            raise ProductUnavailableError(f"Product is not available: {product.name}")

        self._ledger.ensure_available(product, quantity.value)
        self._ledger.decrement(product, quantity.value)
        compensation.record(
            f"restock {quantity.value} x {product.id}",
            lambda: self._ledger.restock(product.id, quantity.value),
        )

        # Name and price are read now, never from the cart's display snapshot.
        return OrderLine(
            product_id=product.id,
            product_name=product.name,
            unit_price=product.price,
            quantity=quantity,
            seller_id=product.seller_id,
        )
