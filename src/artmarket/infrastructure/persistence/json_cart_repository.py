"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from artmarket.domain.model.cart import Cart, CartItem
from artmarket.domain.model.value_objects import Money, Quantity
from artmarket.domain.repository.cart_repository import CartRepository
from artmarket.infrastructure.persistence.json_store import JsonStore


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonStore(file_path)

    def get_by_user_id(self, user_id: str) -> Cart | None:
        for raw in self._store.load():
            if raw["user_id"] == user_id:
                return self._to_domain(raw)
        return None

    def save(self, cart: Cart) -> None:
        self._store.upsert(self._to_raw(cart), key="user_id")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "user_id": cart.user_id,
            "created_at": cart.created_at.isoformat(),
            "updated_at": cart.updated_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "price_snapshot": str(item.price_snapshot.amount),
                    "currency": item.price_snapshot.currency,
                    "added_at": item.added_at.isoformat(),
                }
                for item in cart.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        items = [
            CartItem(
                product_id=i["product_id"],
                quantity=Quantity(i["quantity"]),
                price_snapshot=Money(Decimal(i["price_snapshot"]), i.get("currency", "USD")),
                added_at=datetime.fromisoformat(i["added_at"]),
            )
            for i in raw["items"]
        ]
        return Cart(
            user_id=raw["user_id"],
            items=items,
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
