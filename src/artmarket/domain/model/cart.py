"""Cart aggregate: one per user, created lazily, emptied on checkout.

Cart lines carry a price snapshot taken the first time the product was
added. It keeps the cart view stable while the user browses and is
never used to charge anyone; checkout re-reads the catalog price.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from artmarket.domain.exceptions import NotInCartError
from artmarket.domain.model.value_objects import Money, Quantity


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CartItem:
    product_id: str
    quantity: Quantity
    price_snapshot: Money  # as-added price, display only
    added_at: datetime = field(default_factory=_now)

    @property
    def line_total(self) -> Money:
        return self.price_snapshot * self.quantity.value


@dataclass
class Cart:
    user_id: str
    items: list[CartItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Queries --------------------------------------------------------------

    def find_item(self, product_id: str) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def quantity_of(self, product_id: str) -> int:
        item = self.find_item(product_id)
        return item.quantity.value if item is not None else 0

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def total(self) -> Money:
        return Money.total(item.line_total for item in self.items)

    # --- Mutations ------------------------------------------------------------
    # Stock and availability checks belong to the caller; the cart only
    # keeps its own lines consistent.

    def add(self, product_id: str, quantity: Quantity, price: Money) -> CartItem:
        """Add a new line, or increase an existing one.

        The snapshot is taken only when the line is created.
        """
        item = self.find_item(product_id)
        if item is None:
            item = CartItem(product_id=product_id, quantity=quantity, price_snapshot=price)
            self.items.append(item)
        else:
            item.quantity = item.quantity + quantity
        self._touch()
        return item

    def set_quantity(self, product_id: str, quantity: Quantity) -> CartItem:
        item = self._require_item(product_id)
        item.quantity = quantity
        self._touch()
        return item

    def remove(self, product_id: str) -> None:
        item = self._require_item(product_id)
        self.items.remove(item)
        self._touch()

    def clear(self) -> None:
        self.items.clear()
        self._touch()

    # --- Internal helpers -----------------------------------------------------

    def _require_item(self, product_id: str) -> CartItem:
        item = self.find_item(product_id)
        if item is None:
            raise NotInCartError(f"Product '{product_id}' not found in cart")
        return item

    def _touch(self) -> None:
        self.updated_at = _now()
