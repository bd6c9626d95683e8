"""Application service: Show Order use case (query)."""

from __future__ import annotations

from artmarket.application.dto import OrderDTO
from artmarket.application.mapping import order_to_dto
from artmarket.domain.exceptions import EntityNotFoundError, ForbiddenError
from artmarket.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user_id: str, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order not found with ID: {order_id}")
        if not order.is_owned_by(user_id):
            raise ForbiddenError("You do not have permission to view this order")
        return order_to_dto(order)
