"""Abstract repository for the catalog's products.

Defined in the domain layer so the domain never depends on
infrastructure. Implementations must read fresh on every call; the
checkout relies on seeing the current price and status.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from artmarket.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
