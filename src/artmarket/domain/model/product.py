"""Product, as far as the checkout core is concerned.

The catalog owns products; the core only reads the name, the price and
the availability status, and the maintenance use cases change price and
status. Both can change at any moment, which is why carts and orders
take snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass

from artmarket.domain.exceptions import ValidationError
from artmarket.domain.model.value_objects import Money

AVAILABLE = "Available"


@dataclass
class Product:
    id: str
    name: str
    price: Money
    seller_id: str
    status: str = AVAILABLE

    @property
    def is_available(self) -> bool:
        return self.status.strip().lower() == AVAILABLE.lower()

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        Existing orders are unaffected, their lines hold a price snapshot.
        Cart lines keep their as-added snapshot for display.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def change_status(self, new_status: str) -> None:
        if not new_status or not new_status.strip():
            raise ValidationError("Product status is required")
        self.status = new_status.strip()
