"""Abstract repository for Cart, keyed by user."""

from __future__ import annotations

from abc import ABC, abstractmethod

from artmarket.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_by_user_id(self, user_id: str) -> Cart | None:
        """Return the user's cart, or None if they never had one."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the cart with its lines in insertion order."""
