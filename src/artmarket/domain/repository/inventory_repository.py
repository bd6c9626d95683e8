"""Abstract repository for InventoryRecord."""

from __future__ import annotations

from abc import ABC, abstractmethod

from artmarket.domain.model.inventory import InventoryRecord


class InventoryRepository(ABC):

    @abstractmethod
    def get_by_product_id(self, product_id: str) -> InventoryRecord | None:
        """Return the inventory record for a product, or None."""

    @abstractmethod
    def list_all(self) -> list[InventoryRecord]:
        """Return every inventory record."""

    @abstractmethod
    def save(self, record: InventoryRecord) -> None:
        """Persist a new or updated inventory record."""

    @abstractmethod
    def decrement_if_available(
        self, product_id: str, quantity: int, product_name: str | None = None
    ) -> InventoryRecord:
        """Atomically subtract *quantity* from stock on hand.

        Read, check and write happen as one step: no other decrement of
        the same record may interleave. Raises InsufficientStockError
        (with the availability seen inside the step) when the record
        cannot supply *quantity*, and EntityNotFoundError when there is
        no record. Returns the updated record.
        """

    @abstractmethod
    def restock(self, product_id: str, quantity: int) -> InventoryRecord:
        """Atomically add *quantity* back to stock on hand."""
