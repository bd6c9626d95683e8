"""Unit tests for InventoryRecord."""

import math

import pytest

from artmarket.domain.exceptions import InsufficientStockError, ValidationError
from artmarket.domain.model.inventory import InventoryRecord


class TestInventoryInvariants:

    def test_available_is_on_hand_minus_reserved(self):
        record = InventoryRecord("p1", quantity_on_hand=10, quantity_reserved=3)
        assert record.available_quantity == 7

    def test_unlimited_is_infinite(self):
        record = InventoryRecord("p1", quantity_on_hand=0, unlimited=True)
        assert record.available_quantity == math.inf

    def test_negative_on_hand_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            InventoryRecord("p1", quantity_on_hand=-1)

    def test_reserved_above_on_hand_rejected(self):
        with pytest.raises(ValidationError, match="exceeds"):
            InventoryRecord("p1", quantity_on_hand=2, quantity_reserved=3)


class TestInventoryDecrement:

    def test_decrement_reduces_on_hand(self):
        record = InventoryRecord("p1", quantity_on_hand=10)
        record.decrement(3)
        assert record.quantity_on_hand == 7
        assert record.available_quantity == 7

    def test_decrement_all_available(self):
        record = InventoryRecord("p1", quantity_on_hand=10)
        record.decrement(10)
        assert record.available_quantity == 0

    def test_decrement_more_than_available_rejected(self):
        record = InventoryRecord("p1", quantity_on_hand=10)
        with pytest.raises(InsufficientStockError, match="Available: 10, Requested: 11"):
            record.decrement(11, "Print")
        assert record.quantity_on_hand == 10

    def test_decrement_respects_reserved(self):
        record = InventoryRecord("p1", quantity_on_hand=10, quantity_reserved=8)
        with pytest.raises(InsufficientStockError):
            record.decrement(3)

    def test_decrement_unlimited_is_noop(self):
        record = InventoryRecord("p1", quantity_on_hand=0, unlimited=True)
        record.decrement(1000)
        assert record.quantity_on_hand == 0

    def test_decrement_zero_rejected(self):
        record = InventoryRecord("p1", quantity_on_hand=10)
        with pytest.raises(ValidationError, match="must be positive"):
            record.decrement(0)


class TestInventorySetAndRestock:

    def test_restock_adds_back(self):
        record = InventoryRecord("p1", quantity_on_hand=4)
        record.restock(6)
        assert record.quantity_on_hand == 10

    def test_set_on_hand_clears_unlimited(self):
        record = InventoryRecord("p1", quantity_on_hand=0, unlimited=True)
        record.set_on_hand(5)
        assert not record.unlimited
        assert record.available_quantity == 5

    def test_set_on_hand_below_reserved_rejected(self):
        record = InventoryRecord("p1", quantity_on_hand=5, quantity_reserved=2)
        with pytest.raises(ValidationError, match="below reserved"):
            record.set_on_hand(1)
