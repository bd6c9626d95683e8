"""Application service: Add To Cart use case.

Checks the live catalog and inventory before touching the cart. Adding
a product that is already in the cart increases that line; the check
is against the cumulative quantity.
"""

from __future__ import annotations

import structlog

from artmarket.application.dto import CartDTO
from artmarket.application.mapping import cart_to_dto
from artmarket.domain.exceptions import EntityNotFoundError, ProductUnavailableError
from artmarket.domain.model.cart import Cart
from artmarket.domain.model.value_objects import Quantity
from artmarket.domain.repository.cart_repository import CartRepository
from artmarket.domain.repository.inventory_repository import InventoryRepository
from artmarket.domain.repository.product_repository import ProductRepository
from artmarket.domain.service.inventory_ledger import InventoryLedger

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._ledger = InventoryLedger(inventory_repo)

    def handle(self, user_id: str, product_id: str, quantity: int) -> CartDTO:
        qty = Quantity(quantity)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with ID: {product_id}")
        if not product.is_available:
            raise ProductUnavailableError(f"Product is not available: {product.name}")

        cart = self._cart_repo.get_by_user_id(user_id) or Cart(user_id=user_id)

        requested = cart.quantity_of(product.id) + qty.value
        self._ledger.ensure_available(product, requested)

        cart.add(product.id, qty, product.price)
        self._cart_repo.save(cart)

        logger.info(
            "Added to cart",
            user_id=user_id,
            product_id=product.id,
            quantity=qty.value,
            line_quantity=requested,
        )
        return cart_to_dto(cart, self._product_repo)
