"""Integration tests for the direct PlaceOrder use case."""

import pytest

from artmarket.application.dto import OrderItemSpec
from artmarket.application.payment import mask_payment_token
from artmarket.application.place_order import PlaceOrderHandler
from artmarket.domain.exceptions import InsufficientStockError, ValidationError
from artmarket.domain.model.inventory import InventoryRecord
from artmarket.domain.model.product import Product
from artmarket.domain.model.value_objects import Money
from tests.fakes import FakeInventoryRepository, FakeOrderRepository, FakeProductRepository


def _setup():
    products = FakeProductRepository([
        Product(id="p1", name="Harbour Print", price=Money.of("25.00"), seller_id="s1"),
        Product(id="p3", name="Moon Bowl", price=Money.of("42.00"), seller_id="s2"),
    ])
    inventory = FakeInventoryRepository([
        InventoryRecord("p1", quantity_on_hand=10),
        InventoryRecord("p3", quantity_on_hand=3),
    ])
    orders = FakeOrderRepository()
    return PlaceOrderHandler(orders, products, inventory), orders, inventory


class TestPlaceOrder:

    def test_creates_order_and_decrements(self):
        handler, orders, inventory = _setup()
        dto = handler.handle("u1", [OrderItemSpec("p1", 3), OrderItemSpec("p3", 2)], "1 Main St", "4242")
        assert dto.total == "$159.00"
        assert dto.id == 1
        assert dto.delivery_address == "1 Main St"
        assert inventory.get_by_product_id("p1").quantity_on_hand == 7
        assert inventory.get_by_product_id("p3").quantity_on_hand == 1
        assert orders.get_by_id(1).user_id == "u1"

    def test_sequential_ids(self):
        handler, _, _ = _setup()
        first = handler.handle("u1", [OrderItemSpec("p1", 1)], "1 Main St", "4242")
        second = handler.handle("u2", [OrderItemSpec("p1", 1)], "2 Main St", "4242")
        assert second.id == first.id + 1

    def test_insufficient_stock_rolls_back(self):
        handler, orders, inventory = _setup()
        with pytest.raises(InsufficientStockError, match="Moon Bowl. Available: 3, Requested: 4"):
            handler.handle("u1", [OrderItemSpec("p1", 3), OrderItemSpec("p3", 4)], "1 Main St", "4242")
        assert inventory.get_by_product_id("p1").quantity_on_hand == 10
        assert orders.list_all() == []

    def test_no_items(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle("u1", [], "1 Main St", "4242")

    def test_payment_token_required(self):
        handler, _, inventory = _setup()
        with pytest.raises(ValidationError, match="Payment token"):
            handler.handle("u1", [OrderItemSpec("p1", 1)], "1 Main St", "")
        assert inventory.get_by_product_id("p1").quantity_on_hand == 10


# ── Payment token ────────────────────────────────────────────────────────────


class TestMaskPaymentToken:

    def test_keeps_last_four(self):
        assert mask_payment_token("4111111111111111") == "************1111"

    def test_short_token_not_padded(self):
        assert mask_payment_token("42") == "42"

    def test_blank_rejected(self):
        with pytest.raises(ValidationError):
            mask_payment_token("")
