"""Cash and card payment processing."""

from __future__ import annotations

import math
import random
from typing import Protocol


class InsufficientPaymentError(ValueError):
    """Raised when the cash handed over does not cover the amount due."""

    def __init__(self, amount_due: float, cash_given: float) -> None:
        super().__init__(
            f"cash given ${cash_given:.2f} is less than amount due ${amount_due:.2f}"
        )
        self.amount_due = amount_due
        self.cash_given = cash_given


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


_APPROVAL_RANGE = 1_000_000


def process_cash(amount_due: float, cash_given: float) -> float:
    """Return the change owed, rounded down to the cent.

    Raises InsufficientPaymentError if the cash does not cover the amount due.
    """
    if cash_given < amount_due:
        raise InsufficientPaymentError(amount_due, cash_given)
    return math.floor((cash_given - amount_due) * 100.0) / 100.0


def process_card(amount_due: float, rng: _RandRange | None = None) -> str:
    """Approve a card payment and return its approval code."""
    source = rng if rng is not None else random
    return f"APPROVED-{source.randrange(_APPROVAL_RANGE)}"