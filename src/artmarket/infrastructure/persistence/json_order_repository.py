"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from artmarket.domain.model.order import Order, OrderLine, OrderStatus
from artmarket.domain.model.value_objects import Money, Quantity
from artmarket.domain.repository.order_repository import OrderRepository
from artmarket.infrastructure.persistence.json_store import JsonStore


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonStore(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._store.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_by_user(self, user_id: str) -> list[Order]:
        return [o for o in self.list_all() if o.user_id == user_id]

    def list_all(self) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._store.load()]
        return sorted(orders, key=lambda o: (o.placed_at, o.id), reverse=True)

    def save(self, order: Order) -> None:
        with self._store.lock:
            if order.id is None:
                records = self._store.load()
                order.id = max((r["id"] for r in records), default=0) + 1
            self._store.upsert(self._to_raw(order), key="id")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "delivery_address": order.delivery_address,
            "status": order.status.value,
            "placed_at": order.placed_at.isoformat(),
            "total": str(order.total.amount),
            "currency": order.total.currency,
            "lines": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "unit_price": str(line.unit_price.amount),
                    "quantity": line.quantity.value,
                    "seller_id": line.seller_id,
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD")
        lines = tuple(
            OrderLine(
                product_id=line["product_id"],
                product_name=line["product_name"],
                unit_price=Money(Decimal(line["unit_price"]), currency),
                quantity=Quantity(line["quantity"]),
                seller_id=line["seller_id"],
            )
            for line in raw["lines"]
        )
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            delivery_address=raw["delivery_address"],
            lines=lines,
            total=Money(Decimal(raw["total"]), currency),
            status=OrderStatus(raw["status"]),
            placed_at=datetime.fromisoformat(raw["placed_at"]),
        )
