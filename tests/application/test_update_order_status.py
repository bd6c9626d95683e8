"""Integration tests for the UpdateOrderStatus use case."""

import pytest

from artmarket.application.update_order_status import UpdateOrderStatusHandler
from artmarket.domain.exceptions import EntityNotFoundError, ForbiddenError, InvalidStatusError
from artmarket.domain.model.order import Order, OrderLine, OrderStatus
from artmarket.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderRepository


def _setup():
    orders = FakeOrderRepository()
    order = Order.place("u1", "1 Main St", [
        OrderLine("p1", "Harbour Print", Money.of("25.00"), Quantity(2), "s1"),
        OrderLine("p3", "Moon Bowl", Money.of("42.00"), Quantity(1), "s2"),
    ])
    orders.save(order)
    return UpdateOrderStatusHandler(orders), orders, order.id


class TestUpdateOrderStatus:

    def test_seller_with_a_line_can_update(self):
        handler, orders, order_id = _setup()
        dto = handler.handle("s2", order_id, "Shipped")
        assert dto.status == "Shipped"
        assert orders.get_by_id(order_id).status == OrderStatus.SHIPPED

    def test_status_is_case_insensitive(self):
        handler, _, order_id = _setup()
        assert handler.handle("s1", order_id, "processing").status == "Processing"

    def test_any_transition_is_allowed(self):
        handler, _, order_id = _setup()
        handler.handle("s1", order_id, "Cancelled")
        assert handler.handle("s1", order_id, "Pending").status == "Pending"

    def test_seller_without_lines_is_forbidden(self):
        handler, orders, order_id = _setup()
        with pytest.raises(ForbiddenError, match="permission"):
            handler.handle("s9", order_id, "Shipped")
        assert orders.get_by_id(order_id).status == OrderStatus.PENDING

    def test_unknown_order(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order not found with ID: 99"):
            handler.handle("s1", 99, "Shipped")

    def test_invalid_status(self):
        handler, orders, order_id = _setup()
        with pytest.raises(InvalidStatusError, match="Must be one of"):
            handler.handle("s1", order_id, "Teleported")
        assert orders.get_by_id(order_id).status == OrderStatus.PENDING

    def test_ownership_checked_before_status_value(self):
        handler, _, order_id = _setup()
        with pytest.raises(ForbiddenError):
            handler.handle("s9", order_id, "Teleported")
