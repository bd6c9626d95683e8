"""Application service: Update Product use case (price and status only)."""

from __future__ import annotations

import structlog

from artmarket.domain.exceptions import EntityNotFoundError, ValidationError
from artmarket.domain.model.product import Product
from artmarket.domain.model.value_objects import Money
from artmarket.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        new_status: str | None = None,
    ) -> Product:
        """Change a product's price and/or availability status.

        Placed orders keep the price they were charged. Carts keep their
        as-added price for display but are re-validated at checkout.
        """
        if new_price is None and new_status is None:
            raise ValidationError("Nothing to update: give a price or a status")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with ID: {product_id}")

        if new_price is not None:
            product.update_price(Money.of(new_price))
        if new_status is not None:
            product.change_status(new_status)
        self._product_repo.save(product)

        logger.info(
            "Product updated",
            product_id=product_id,
            price=str(product.price),
            status=product.status,
        )
        return product
