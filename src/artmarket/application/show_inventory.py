"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from artmarket.domain.repository.inventory_repository import InventoryRepository
from artmarket.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class InventoryLineDTO:
    product_id: str
    product_name: str
    on_hand: int
    reserved: int
    available: str  # "unlimited" for digital goods


class ShowInventoryHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._product_repo = product_repo

    def handle(self) -> list[InventoryLineDTO]:
        lines = []
        for record in self._inventory_repo.list_all():
            product = self._product_repo.get_by_id(record.product_id)
            lines.append(
                InventoryLineDTO(
                    product_id=record.product_id,
                    product_name=product.name if product is not None else "?",
                    on_hand=record.quantity_on_hand,
                    reserved=record.quantity_reserved,
                    available="unlimited" if record.unlimited else str(record.available_quantity),
                )
            )
        return lines
