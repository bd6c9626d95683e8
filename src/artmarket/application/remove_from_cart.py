"""Application service: Remove From Cart use case."""

from __future__ import annotations

import structlog

from artmarket.application.dto import CartDTO
from artmarket.application.mapping import cart_to_dto
from artmarket.domain.exceptions import NotInCartError
from artmarket.domain.repository.cart_repository import CartRepository
from artmarket.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RemoveFromCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_id: str) -> CartDTO:
        cart = self._cart_repo.get_by_user_id(user_id)
        if cart is None:
            raise NotInCartError(f"Product '{product_id}' not found in cart")

        cart.remove(product_id)
        self._cart_repo.save(cart)

        logger.info("Removed from cart", user_id=user_id, product_id=product_id)
        return cart_to_dto(cart, self._product_repo)
