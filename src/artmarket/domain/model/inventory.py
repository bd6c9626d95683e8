"""InventoryRecord: stock arithmetic for a single product.

One record per product. ``quantity_reserved`` is carried for a future
hold-based checkout and is always zero today. Digital goods are flagged
``unlimited`` and never run out.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from artmarket.domain.exceptions import InsufficientStockError, ValidationError

UNLIMITED = math.inf


@dataclass
class InventoryRecord:
    """Invariants:

    - ``quantity_on_hand`` and ``quantity_reserved`` are never negative
    - ``quantity_on_hand - quantity_reserved >= 0``
    """

    product_id: str
    quantity_on_hand: int
    quantity_reserved: int = 0
    unlimited: bool = False

    def __post_init__(self) -> None:
        if self.quantity_on_hand < 0:
            raise ValidationError("Quantity on hand cannot be negative")
        if self.quantity_reserved < 0:
            raise ValidationError("Reserved quantity cannot be negative")
        if self.quantity_on_hand < self.quantity_reserved:
            raise ValidationError(
                f"Reserved quantity {self.quantity_reserved} exceeds "
                f"quantity on hand {self.quantity_on_hand}"
            )

    @property
    def available_quantity(self) -> int | float:
        if self.unlimited:
            return UNLIMITED
        return self.quantity_on_hand - self.quantity_reserved

    def can_supply(self, quantity: int) -> bool:
        return quantity <= self.available_quantity

    def decrement(self, quantity: int, product_name: str | None = None) -> None:
        """Take *quantity* units off the shelf. A no-op for unlimited stock."""
        if quantity <= 0:
            raise ValidationError("Decrement quantity must be positive")
        if self.unlimited:
            return
        if not self.can_supply(quantity):
            raise InsufficientStockError(
                product_name or self.product_id, self.available_quantity, quantity
            )
        self.quantity_on_hand -= quantity

    def restock(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Restock quantity must be positive")
        if self.unlimited:
            return
        self.quantity_on_hand += quantity

    def set_on_hand(self, quantity: int) -> None:
        """Absolute set, used by sellers managing their stock."""
        if quantity < self.quantity_reserved:
            raise ValidationError(
                f"Quantity on hand cannot drop below reserved quantity "
                f"({self.quantity_reserved})"
            )
        self.quantity_on_hand = quantity
        self.unlimited = False

    def mark_unlimited(self) -> None:
        self.unlimited = True
