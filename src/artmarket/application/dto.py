"""Data Transfer Objects: plain containers that cross layer boundaries.

Amounts are pre-formatted strings (e.g. "$25.00") so presentation code
never handles Money directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: a product and how many units of it to buy."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class CartItemDTO:
    product_id: str
    product_name: str
    quantity: int
    price_snapshot: str  # as-added price
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    user_id: str
    items: list[CartItemDTO]
    total: str
    item_count: int


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """An order as shown to buyers and sellers.

    ``items`` is empty for summaries (history and seller listings).
    """

    id: int
    user_id: str
    status: str
    total: str
    placed_at: str
    delivery_address: str
    item_count: int
    items: list[OrderLineDTO] = field(default_factory=list)
