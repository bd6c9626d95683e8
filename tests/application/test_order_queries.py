"""Integration tests for the order query use cases."""

from datetime import datetime, timedelta, timezone

import pytest

from artmarket.application.order_history import OrderHistoryHandler, SellerOrdersHandler
from artmarket.application.show_order import ShowOrderHandler
from artmarket.domain.exceptions import EntityNotFoundError, ForbiddenError
from artmarket.domain.model.order import Order, OrderLine
from artmarket.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderRepository


def _order(user_id: str, seller_id: str, minutes_ago: int) -> Order:
    order = Order.place(user_id, "1 Main St", [
        OrderLine("p1", "Harbour Print", Money.of("25.00"), Quantity(1), seller_id),
    ])
    order.placed_at = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc) - timedelta(minutes=minutes_ago)
    return order


def _setup():
    orders = FakeOrderRepository()
    orders.save(_order("u1", "s1", minutes_ago=30))  # id 1
    orders.save(_order("u2", "s2", minutes_ago=20))  # id 2
    orders.save(_order("u1", "s2", minutes_ago=10))  # id 3
    return orders


class TestShowOrder:

    def test_owner_sees_lines(self):
        dto = ShowOrderHandler(_setup()).handle("u1", 1)
        assert dto.items[0].product_name == "Harbour Print"
        assert dto.placed_at == "2026-01-01 11:30 UTC"

    def test_other_user_forbidden(self):
        with pytest.raises(ForbiddenError, match="You do not have permission to view this order"):
            ShowOrderHandler(_setup()).handle("u2", 1)

    def test_unknown_order(self):
        with pytest.raises(EntityNotFoundError):
            ShowOrderHandler(_setup()).handle("u1", 42)


class TestOrderHistory:

    def test_newest_first_without_lines(self):
        history = OrderHistoryHandler(_setup()).handle("u1")
        assert [o.id for o in history] == [3, 1]
        assert all(o.items == [] for o in history)
        assert history[0].item_count == 1

    def test_no_orders(self):
        assert OrderHistoryHandler(_setup()).handle("nobody") == []


class TestSellerOrders:

    def test_orders_with_any_of_the_sellers_lines(self):
        listing = SellerOrdersHandler(_setup()).handle("s2")
        assert [o.id for o in listing] == [3, 2]

    def test_seller_without_orders(self):
        assert SellerOrdersHandler(_setup()).handle("s9") == []
