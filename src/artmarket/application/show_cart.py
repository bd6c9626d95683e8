"""Application service: Show Cart use case (query).

The cart is created on first access, so every user always has one to
look at.
"""

from __future__ import annotations

from artmarket.application.dto import CartDTO
from artmarket.application.mapping import cart_to_dto
from artmarket.domain.model.cart import Cart
from artmarket.domain.repository.cart_repository import CartRepository
from artmarket.domain.repository.product_repository import ProductRepository


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str) -> CartDTO:
        cart = self._cart_repo.get_by_user_id(user_id)
        if cart is None:
            cart = Cart(user_id=user_id)
            self._cart_repo.save(cart)
        return cart_to_dto(cart, self._product_repo)
