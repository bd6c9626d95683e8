"""Application service: Order History and Seller Orders (queries).

Both return summaries without line detail, newest first.
"""

from __future__ import annotations

from artmarket.application.dto import OrderDTO
from artmarket.application.mapping import order_to_dto
from artmarket.domain.repository.order_repository import OrderRepository


class OrderHistoryHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user_id: str) -> list[OrderDTO]:
        return [
            order_to_dto(order, include_items=False)
            for order in self._order_repo.list_by_user(user_id)
        ]


class SellerOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, seller_id: str) -> list[OrderDTO]:
        """Orders that contain at least one of the seller's products."""
        return [
            order_to_dto(order, include_items=False)
            for order in self._order_repo.list_all()
            if order.involves_seller(seller_id)
        ]
