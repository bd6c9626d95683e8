"""Domain service: Inventory Ledger.

The single place where stock is read for a decision or taken off the
shelf. Decrements go through the repository's atomic
``decrement_if_available`` so two buyers racing for the last units can
never both succeed.
"""

from __future__ import annotations

import structlog

from artmarket.domain.exceptions import EntityNotFoundError, InsufficientStockError
from artmarket.domain.model.inventory import InventoryRecord
from artmarket.domain.model.product import Product
from artmarket.domain.repository.inventory_repository import InventoryRepository

logger = structlog.get_logger(__name__)


class InventoryLedger:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def record_for(self, product_id: str, product_name: str | None = None) -> InventoryRecord:
        record = self._inventory_repo.get_by_product_id(product_id)
        if record is None:
            raise EntityNotFoundError(
                f"No inventory record found for product: {product_name or product_id}"
            )
        return record

    def available_quantity(self, product_id: str) -> int | float:
        """On hand minus reserved, or ``math.inf`` for unlimited goods."""
        return self.record_for(product_id).available_quantity

    def ensure_available(
        self, product: Product, quantity: int, label: str = "Requested"
    ) -> None:
        """Read-only check; does not hold anything for the caller."""
        record = self.record_for(product.id, product.name)
        if not record.can_supply(quantity):
            raise InsufficientStockError(
                product.name, record.available_quantity, quantity, label=label
            )

    def decrement(self, product: Product, quantity: int) -> InventoryRecord:
        record = self._inventory_repo.decrement_if_available(
            product.id, quantity, product.name
        )
        logger.debug(
            "Inventory decremented",
            product_id=product.id,
            quantity=quantity,
            on_hand=record.quantity_on_hand,
            unlimited=record.unlimited,
        )
        return record

    def restock(self, product_id: str, quantity: int) -> InventoryRecord:
        record = self._inventory_repo.restock(product_id, quantity)
        logger.info(
            "Inventory restocked",
            product_id=product_id,
            quantity=quantity,
            on_hand=record.quantity_on_hand,
        )
        return record
