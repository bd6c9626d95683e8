"""Domain service: Checkout Validator.

Time passes between the user looking at their cart and pressing
checkout; products can be withdrawn and stock can run out. This
re-checks every line against the live catalog and inventory right
before conversion. It is a staleness guard, not a hold.
"""

from __future__ import annotations

from artmarket.domain.exceptions import (
    EmptyCartError,
    EntityNotFoundError,
    ProductUnavailableError,
)
from artmarket.domain.model.cart import Cart
from artmarket.domain.repository.cart_repository import CartRepository
from artmarket.domain.repository.inventory_repository import InventoryRepository
from artmarket.domain.repository.product_repository import ProductRepository
from artmarket.domain.service.inventory_ledger import InventoryLedger


class CheckoutValidator:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._ledger = InventoryLedger(inventory_repo)

    def validate(self, user_id: str) -> Cart:
        """Return the cart that passed, so the caller converts what was checked."""
        cart = self._cart_repo.get_by_user_id(user_id)
        if cart is None or cart.is_empty:
            raise EmptyCartError("Cart is empty")

        for item in cart.items:
            product = self._product_repo.get_by_id(item.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product not found with ID: {item.product_id}"
                )
            if not product.is_available:
                raise ProductUnavailableError(
                    f"Product is no longer available: {product.name}"
                )
            self._ledger.ensure_available(
                product, item.quantity.value, label="In cart"
            )
        return cart
