"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException so the CLI
layer can catch them uniformly and display the message as-is.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested cart, order, product or inventory record does not exist."""


class ProductUnavailableError(DomainException):
    """The product's status is not Available."""


class InsufficientStockError(DomainException):
    """More units were requested than are available."""

    def __init__(
        self,
        product_name: str,
        available: int | float,
        requested: int,
        label: str = "Requested",
    ) -> None:
        self.product_name = product_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for product: {product_name}. "
            f"Available: {available}, {label}: {requested}"
        )


class EmptyCartError(DomainException):
    """Checkout was attempted on a cart with no lines."""


class NotInCartError(DomainException):
    """Update or remove was attempted on a product that is not in the cart."""


class ForbiddenError(DomainException):
    """The caller does not own the resource it is acting on."""


class InvalidStatusError(DomainException):
    """An order status value is not one of the recognised statuses."""
