"""Order aggregate: the immutable record of a purchase.

Lines are frozen snapshots of name and unit price taken at checkout.
After creation only ``status`` may change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from artmarket.domain.exceptions import InvalidStatusError, ValidationError
from artmarket.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, raw: str | OrderStatus) -> OrderStatus:
        """Look a status up by value, ignoring case and surrounding spaces."""
        if isinstance(raw, OrderStatus):
            return raw
        wanted = (raw or "").strip().lower()
        for status in cls:
            if status.value.lower() == wanted:
                return status
        allowed = ", ".join(s.value for s in cls)
        raise InvalidStatusError(
            f"Invalid order status '{raw}'. Must be one of: {allowed}"
        )


@dataclass(frozen=True)
class OrderLine:
    """Price and name as they were at the moment of purchase.

    ``product_id`` is kept for lookups only; the snapshot fields are
    authoritative even if the product is later renamed, repriced or
    removed.
    """

    product_id: str
    product_name: str
    unit_price: Money
    quantity: Quantity
    seller_id: str

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.place()`` for new orders. ``__init__`` stays plain so the
    repository can reconstitute persisted orders without recomputing.
    """

    id: int | None
    user_id: str
    delivery_address: str
    lines: tuple[OrderLine, ...]
    total: Money
    status: OrderStatus = OrderStatus.PENDING
    placed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def place(user_id: str, delivery_address: str, lines: list[OrderLine]) -> Order:
        if not delivery_address or not delivery_address.strip():
            raise ValidationError("Delivery address is required")
        if not lines:
            raise ValidationError("Order must contain at least one item")
        return Order(
            id=None,
            user_id=user_id,
            delivery_address=delivery_address.strip(),
            lines=tuple(lines),
            total=Money.total(line.line_total for line in lines),
        )

    # --- Fulfillment ----------------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> OrderStatus:
        """Set any of the five statuses, from any state. Returns the old one."""
        previous = self.status
        self.status = new_status
        return previous

    # --- Queries --------------------------------------------------------------

    def involves_seller(self, seller_id: str) -> bool:
        return any(line.seller_id == seller_id for line in self.lines)

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)
