"""Application service: Update Order Status use case (seller fulfillment).

Any seller with at least one line in the order may set any of the five
statuses, from any state. Inventory is never touched here, so
cancelling does not restock.
"""

from __future__ import annotations

import structlog

from artmarket.application.dto import OrderDTO
from artmarket.application.mapping import order_to_dto
from artmarket.domain.exceptions import EntityNotFoundError, ForbiddenError
from artmarket.domain.model.order import OrderStatus
from artmarket.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, seller_id: str, order_id: int, new_status: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order not found with ID: {order_id}")

        if not order.involves_seller(seller_id):
            raise ForbiddenError(
                f"You do not have permission to update order #{order_id}"
            )

        status = OrderStatus.parse(new_status)
        previous = order.change_status(status)
        self._order_repo.save(order)

        logger.info(
            "Order status changed",
            order_id=order_id,
            seller_id=seller_id,
            previous=previous.value,
            status=status.value,
        )
        return order_to_dto(order)
