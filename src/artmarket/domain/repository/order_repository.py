"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from artmarket.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_user(self, user_id: str) -> list[Order]:
        """Return the user's orders, newest first."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning an ID to new ones."""
