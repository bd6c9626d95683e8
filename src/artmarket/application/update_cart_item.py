"""Application service: Update Cart Item quantity use case."""

from __future__ import annotations

import structlog

from artmarket.application.dto import CartDTO
from artmarket.application.mapping import cart_to_dto
from artmarket.domain.exceptions import EntityNotFoundError, NotInCartError
from artmarket.domain.model.value_objects import Quantity
from artmarket.domain.repository.cart_repository import CartRepository
from artmarket.domain.repository.inventory_repository import InventoryRepository
from artmarket.domain.repository.product_repository import ProductRepository
from artmarket.domain.service.inventory_ledger import InventoryLedger

logger = structlog.get_logger(__name__)


class UpdateCartItemHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._ledger = InventoryLedger(inventory_repo)

    def handle(self, user_id: str, product_id: str, new_quantity: int) -> CartDTO:
        """Replace a line's quantity.

        The new quantity is checked against current stock as-is. The cart
        holds no reservation, so its existing quantity is not credited.
        """
        qty = Quantity(new_quantity)

        cart = self._cart_repo.get_by_user_id(user_id)
        if cart is None or cart.find_item(product_id) is None:
            raise NotInCartError(f"Product '{product_id}' not found in cart")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found with ID: {product_id}")
        self._ledger.ensure_available(product, qty.value)

        cart.set_quantity(product_id, qty)
        self._cart_repo.save(cart)

        logger.info(
            "Cart quantity updated",
            user_id=user_id,
            product_id=product_id,
            quantity=qty.value,
        )
        return cart_to_dto(cart, self._product_repo)
