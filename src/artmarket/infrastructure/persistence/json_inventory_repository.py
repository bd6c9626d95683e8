"""JSON-file-backed implementation of InventoryRepository.

``decrement_if_available`` and ``restock`` hold the file's lock across
load, check and persist, which makes them atomic within one process.
"""

from __future__ import annotations

from pathlib import Path

from artmarket.domain.exceptions import EntityNotFoundError
from artmarket.domain.model.inventory import InventoryRecord
from artmarket.domain.repository.inventory_repository import InventoryRepository
from artmarket.infrastructure.persistence.json_store import JsonStore


class JsonInventoryRepository(InventoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonStore(file_path)

    # --- InventoryRepository interface ----------------------------------------

    def get_by_product_id(self, product_id: str) -> InventoryRecord | None:
        for raw in self._store.load():
            if raw["product_id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[InventoryRecord]:
        return [self._to_domain(raw) for raw in self._store.load()]

    def save(self, record: InventoryRecord) -> None:
        self._store.upsert(self._to_raw(record), key="product_id")

    def decrement_if_available(
        self, product_id: str, quantity: int, product_name: str | None = None
    ) -> InventoryRecord:
        with self._store.lock:
            records = self._store.load()
            index, record = self._find(records, product_id, product_name)
            record.decrement(quantity, product_name)
            records[index] = self._to_raw(record)
            self._store.persist(records)
            return record

    def restock(self, product_id: str, quantity: int) -> InventoryRecord:
        with self._store.lock:
            records = self._store.load()
            index, record = self._find(records, product_id)
            record.restock(quantity)
            records[index] = self._to_raw(record)
            self._store.persist(records)
            return record

    # --- Serialization --------------------------------------------------------

    def _find(
        self, records: list[dict], product_id: str, product_name: str | None = None
    ) -> tuple[int, InventoryRecord]:
        for i, raw in enumerate(records):
            if raw["product_id"] == product_id:
                return i, self._to_domain(raw)
        raise EntityNotFoundError(
            f"No inventory record found for product: {product_name or product_id}"
        )

    @staticmethod
    def _to_raw(record: InventoryRecord) -> dict:
        return {
            "product_id": record.product_id,
            "quantity_on_hand": record.quantity_on_hand,
            "quantity_reserved": record.quantity_reserved,
            "unlimited": record.unlimited,
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryRecord:
        return InventoryRecord(
            product_id=raw["product_id"],
            quantity_on_hand=raw["quantity_on_hand"],
            quantity_reserved=raw.get("quantity_reserved", 0),
            unlimited=raw.get("unlimited", False),
        )
