"""Application service: Set Inventory use case.

Absolute set of a product's stock, as a seller does when restocking.
Not part of checkout; checkout only ever decrements.
"""

from __future__ import annotations

import structlog

from artmarket.domain.exceptions import EntityNotFoundError, ValidationError
from artmarket.domain.model.inventory import InventoryRecord
from artmarket.domain.repository.inventory_repository import InventoryRepository
from artmarket.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class SetInventoryHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        quantity: int | None = None,
        unlimited: bool = False,
    ) -> InventoryRecord:
        """Set stock on hand to *quantity*, or mark the product unlimited."""
        if unlimited == (quantity is not None):
            raise ValidationError("Give either a quantity or unlimited, not both")
        if quantity is not None and quantity < 0:
            raise ValidationError("Quantity on hand cannot be negative")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with ID: {product_id}")

        record = self._inventory_repo.get_by_product_id(product.id)
        if record is None:
            record = InventoryRecord(product_id=product.id, quantity_on_hand=quantity or 0)
        elif quantity is not None:
            record.set_on_hand(quantity)
        if unlimited:
            record.mark_unlimited()
        self._inventory_repo.save(record)

        logger.info(
            "Inventory set",
            product_id=product.id,
            on_hand=record.quantity_on_hand,
            unlimited=record.unlimited,
        )
        return record
