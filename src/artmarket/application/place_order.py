"""Application service: Place Order use case (direct, without a cart).

The older path where a client submits products and quantities
directly. It runs the same conversion engine as checkout, minus the
cart read and clear.
"""

from __future__ import annotations

import structlog

from artmarket.application.dto import OrderDTO, OrderItemSpec
from artmarket.application.mapping import order_to_dto
from artmarket.application.payment import mask_payment_token
from artmarket.domain.repository.inventory_repository import InventoryRepository
from artmarket.domain.repository.order_repository import OrderRepository
from artmarket.domain.repository.product_repository import ProductRepository
from artmarket.domain.service.compensation import CompensationLog
from artmarket.domain.service.order_placement_service import (
    LineRequest,
    OrderPlacementService,
)

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._order_repo = order_repo
        self._placement = OrderPlacementService(product_repo, inventory_repo)

    def handle(
        self,
        user_id: str,
        item_specs: list[OrderItemSpec],
        delivery_address: str,
        payment_token: str,
    ) -> OrderDTO:
        masked = mask_payment_token(payment_token)
        requests = [LineRequest(spec.product_id, spec.quantity) for spec in item_specs]

        with CompensationLog(user_id=user_id) as compensation:
            order = self._placement.convert(
                user_id, delivery_address, requests, compensation
            )
            self._order_repo.save(order)

        logger.info(
            "Order placed",
            user_id=user_id,
            order_id=order.id,
            total=str(order.total),
            payment=masked,
        )
        return order_to_dto(order)
