"""Application service: Cart Item Count use case (query).

Feeds the cart badge. Read-only: a user without a cart gets 0 and no
cart is created.
"""

from __future__ import annotations

from artmarket.domain.repository.cart_repository import CartRepository


class CartItemCountHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, user_id: str) -> int:
        cart = self._cart_repo.get_by_user_id(user_id)
        if cart is None:
            return 0
        return cart.item_count
