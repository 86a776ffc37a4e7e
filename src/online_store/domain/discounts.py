"""
Discount strategies (Strategy pattern).

The OrderProcessor never sees a concrete strategy: it receives a
DiscountCalculator bound to one `DiscountStrategy` (a Protocol) and calls
`calculate()`. To add a new discount scheme, implement the protocol and hand
it to a DiscountCalculator; nothing else changes.

Strategies are pure: no I/O, no state beyond their configured parameter.
"""

import math
from typing import Protocol

from online_store.errors import InvalidInputError


class DiscountStrategy(Protocol):
    """Interface for turning a subtotal into a discounted total.

    Anything with an `apply_discount(amount) -> float` method works as a
    strategy; subclassing is not required.
    """

    def apply_discount(self, amount: float) -> float: ...


class NoDiscount:
    """Identity: the total equals the subtotal."""

    def apply_discount(self, amount: float) -> float:
        return amount

    def __repr__(self) -> str:
        return "NoDiscount()"


class PercentageDiscount:
    """Takes a fraction off the amount, e.g. 0.1 for 10 % off.

    The percentage is not clamped: a value above 1 produces a negative
    total, and a negative value acts as a surcharge.

    Examples:
        - PercentageDiscount(0.1).apply_discount(1100) -> 990
        - PercentageDiscount(1.5).apply_discount(100)  -> -50
    """

    def __init__(self, percentage: float) -> None:
        self._percentage = percentage

    @property
    def percentage(self) -> float:
        return self._percentage

    def apply_discount(self, amount: float) -> float:
        return amount * (1 - self._percentage)

    def __repr__(self) -> str:
        return f"PercentageDiscount({self._percentage!r})"


class FixedAmountDiscount:
    """Takes a fixed amount off, never going below zero.

    Examples:
        - FixedAmountDiscount(50).apply_discount(400) -> 350
        - FixedAmountDiscount(50).apply_discount(30)  -> 0
    """

    def __init__(self, amount: float) -> None:
        if not math.isfinite(amount) or amount < 0:
            raise InvalidInputError(f"Fixed discount amount must be a finite non-negative number, got {amount}")
        self._amount = amount

    @property
    def amount(self) -> float:
        return self._amount

    def apply_discount(self, amount: float) -> float:
        return max(0, amount - self._amount)

    def __repr__(self) -> str:
        return f"FixedAmountDiscount({self._amount!r})"


class DiscountCalculator:
    """Binds one DiscountStrategy for the lifetime of the calculator."""

    def __init__(self, strategy: DiscountStrategy) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> DiscountStrategy:
        return self._strategy

    def calculate(self, amount: float) -> float:
        return self._strategy.apply_discount(amount)
