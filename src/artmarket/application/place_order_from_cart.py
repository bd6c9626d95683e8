"""Application service: Place Order From Cart use case (checkout).

Orchestrates the validator, the conversion engine and the repositories
so that checkout is all-or-nothing:

1. Re-validate the whole cart against live catalog and stock.
2. Convert each line into an order line, decrementing stock atomically.
3. Empty the cart.
4. Persist the order.

Steps 2-4 share one CompensationLog. If anything fails, stock taken so
far is put back, the cart is restored, no order is saved, and the
original error reaches the caller unchanged.
"""

from __future__ import annotations

import copy

import structlog

from artmarket.application.dto import OrderDTO
from artmarket.application.mapping import order_to_dto
from artmarket.application.payment import mask_payment_token
from artmarket.domain.exceptions import EmptyCartError
from artmarket.domain.repository.cart_repository import CartRepository
from artmarket.domain.repository.inventory_repository import InventoryRepository
from artmarket.domain.repository.order_repository import OrderRepository
from artmarket.domain.repository.product_repository import ProductRepository
from artmarket.domain.service.checkout_validator import CheckoutValidator
from artmarket.domain.service.compensation import CompensationLog
from artmarket.domain.service.order_placement_service import (
    LineRequest,
    OrderPlacementService,
)

logger = structlog.get_logger(__name__)


class PlaceOrderFromCartHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._order_repo = order_repo
        self._cart_repo = cart_repo
        self._validator = CheckoutValidator(cart_repo, product_repo, inventory_repo)
        self._placement = OrderPlacementService(product_repo, inventory_repo)

    def handle(self, user_id: str, delivery_address: str, payment_token: str) -> OrderDTO:
        masked = mask_payment_token(payment_token)
        log = logger.bind(user_id=user_id)
        log.info("Checkout started", payment=masked)

        try:
            cart = self._validator.validate(user_id)
            # Convert exactly the lines that were validated
            saved_cart = copy.deepcopy(cart)
            if saved_cart.is_empty:
                raise EmptyCartError("Cart is empty")
        except Exception as exc:
            log.info("Checkout rejected", reason=str(exc))
            raise

        requests = [
            LineRequest(product_id=item.product_id, quantity=item.quantity.value)
            for item in saved_cart.items
        ]

        with CompensationLog(user_id=user_id) as compensation:
            order = self._placement.convert(
                user_id, delivery_address, requests, compensation
            )

            cart.clear()
            self._cart_repo.save(cart)
            compensation.record(
                "restore cart", lambda: self._cart_repo.save(saved_cart)
            )

            self._order_repo.save(order)

        log.info("Checkout completed", order_id=order.id, total=str(order.total))
        return order_to_dto(order)
