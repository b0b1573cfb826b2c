"""Price and quantity types for catalog records and orders.

Both are frozen and validate on construction, so a Record never holds a
negative price and an Order never holds zero copies.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import total_ordering

from recordstore.domain.exceptions import ValidationError


@total_ordering
@dataclass(frozen=True)
class Money:
    """A non-negative price.

    Held as Decimal: 29.99 x 3 must come out as exactly 89.97 on an order
    total, which binary floats cannot promise.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount.is_signed() and self.amount != 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Build from user or stored input; floats go through ``str`` to keep cents."""
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    def __mul__(self, copies: int) -> Money:
        # bool is an int subclass; Money * True is a bug, not a price
        if isinstance(copies, bool) or not isinstance(copies, int):
            raise TypeError(f"Can only multiply Money by int, got {type(copies).__name__}")
        return Money(self.amount * copies, self.currency)

    def __lt__(self, other: Money) -> bool:
        if self.currency != other.currency:
            raise ValidationError(f"Cannot compare {self.currency} with {other.currency}")
        return self.amount < other.amount

    def __str__(self) -> str:
        return f"${self.amount:.2f}"


@dataclass(frozen=True)
class Quantity:
    """Copies of one record on an order; at least one."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Order quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError(f"Order quantity must be positive, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)
