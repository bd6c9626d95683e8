"""Value objects shared across the domain.

Immutable, compared by value. Validation happens on construction so an
invalid price or quantity can never reach a cart or an order.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable

from artmarket.domain.exceptions import ValidationError

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """A non-negative monetary amount, rounded to cents."""

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        object.__setattr__(
            self, "amount", self.amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        )

    # --- Arithmetic -----------------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | int | Decimal, currency: str = "USD") -> Money:
        """Coerce to Decimal via ``str`` so floats never leak binary noise."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0"), currency)

    @staticmethod
    def total(amounts: Iterable[Money], currency: str = "USD") -> Money:
        result = Money.zero(currency)
        for amount in amounts:
            result = result + amount
        return result


@dataclass(frozen=True)
class Quantity:
    """A positive integer number of units."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True must not count as one unit
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)
