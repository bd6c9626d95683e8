"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from artmarket.domain.model.product import AVAILABLE, Product
from artmarket.domain.model.value_objects import Money
from artmarket.domain.repository.product_repository import ProductRepository
from artmarket.infrastructure.persistence.json_store import JsonStore


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonStore(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._store.load():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._store.load()]

    def save(self, product: Product) -> None:
        self._store.upsert(self._to_raw(product), key="id")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "seller_id": product.seller_id,
            "status": product.status,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            seller_id=raw["seller_id"],
            status=raw.get("status", AVAILABLE),
        )
