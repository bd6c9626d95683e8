"""Application service: Clear Cart use case."""

from __future__ import annotations

import structlog

from artmarket.application.dto import CartDTO
from artmarket.application.mapping import cart_to_dto
from artmarket.domain.model.cart import Cart
from artmarket.domain.repository.cart_repository import CartRepository
from artmarket.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class ClearCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str) -> CartDTO:
        """Empty the cart. Never fails, even if the user has no cart yet."""
        cart = self._cart_repo.get_by_user_id(user_id)
        if cart is None:
            return cart_to_dto(Cart(user_id=user_id), self._product_repo)

        cart.clear()
        self._cart_repo.save(cart)
        logger.info("Cart cleared", user_id=user_id)
        return cart_to_dto(cart, self._product_repo)
