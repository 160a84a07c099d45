"""
Domain: Monetary value.

Immutable amount + currency value object used for every price, cost and tax
figure in the invoicing model.

Rules implemented here:
- Amounts are Decimal, always held at 2 decimal places (banker's rounding).
- Equality is structural (amount + currency).
- A zero amount is compatible with any currency and adopts the other side's
  currency in arithmetic; otherwise currencies must match.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import ClassVar, Iterable, Optional, Union

DEFAULT_CURRENCY: str = "EUR"

_CENTS = Decimal("0.01")

Numeric = Union[int, str, Decimal, float]


class CurrencyMismatchError(ValueError):
    """Raised when combining two non-zero amounts in different currencies."""
    pass


def to_decimal(value: Numeric, name: str) -> Decimal:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be numeric, got bool")
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"{name} is not a valid decimal: {value!r}") from e


@dataclass(frozen=True, slots=True)
class Money:
    """
    Amount of money in a single currency.

    Example:
        Money(11) == Money("11.00", "EUR")   # True
        Money(10) + Money("2.50")            # Money(amount=Decimal('12.50'), currency='EUR')
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    ZERO: ClassVar["Money"]

    def __post_init__(self) -> None:
        amount = to_decimal(self.amount, "amount")
        if not amount.is_finite():
            raise ValueError(f"amount must be finite, got {amount}")
        currency = str(self.currency or "").strip().upper()
        if len(currency) != 3 or not currency.isalpha():
            raise ValueError(f"currency must be a three-letter code such as EUR, got {self.currency!r}")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "amount", amount.quantize(_CENTS, rounding=ROUND_HALF_EVEN))
        object.__setattr__(self, "currency", currency)

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_compatible(self, other: "Money") -> bool:
        """Zero is compatible with everything; otherwise currencies must match."""

        return self.is_zero() or other.is_zero() or self.currency == other.currency

    def _resolve_currency(self, other: "Money") -> str:
        if not self.is_compatible(other):
            raise CurrencyMismatchError(
                f"Cannot combine {self.currency} with {other.currency}"
            )
        if self.is_zero() and not other.is_zero():
            return other.currency
        return self.currency

    def add(self, other: "Money") -> "Money":
        currency = self._resolve_currency(other)
        return Money(self.amount + other.amount, currency)

    def subtract(self, other: "Money") -> "Money":
        currency = self._resolve_currency(other)
        return Money(self.amount - other.amount, currency)

    def multiply_by(self, factor: Numeric) -> "Money":
        return Money(self.amount * to_decimal(factor, "factor"), self.currency)

    def __add__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, factor: object) -> "Money":
        if isinstance(factor, Money) or not isinstance(factor, (int, str, Decimal, float)):
            return NotImplemented
        return self.multiply_by(factor)

    __rmul__ = __mul__

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._resolve_currency(other)
        return self.amount < other.amount

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._resolve_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._resolve_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._resolve_currency(other)
        return self.amount >= other.amount

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    @staticmethod
    def sum(amounts: Iterable["Money"], start: Optional["Money"] = None) -> "Money":
        """Fold amounts with `add`, starting from ZERO unless told otherwise."""

        total = ZERO if start is None else start
        for amount in amounts:
            total = total.add(amount)
        return total


ZERO: Money = Money(Decimal("0"), DEFAULT_CURRENCY)

Money.ZERO = ZERO


__all__ = [
    "DEFAULT_CURRENCY",
    "ZERO",
    "CurrencyMismatchError",
    "Money",
    "to_decimal",
]
