"""The machine's store of coins and notes for giving change."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime, timedelta

from selfcheckout.display import UserDisplay

# Denomination in cents -> stocked quantity; $200 in all.
_STARTING_STOCK: dict[int, int] = {
    10000: 0,
    5000: 2,
    2000: 2,
    1000: 4,
    500: 2,
    100: 6,
    25: 6,
    10: 10,
    5: 10,
    1: 100,
}

LOW_THRESHOLD_CENTS = 5000
REPLENISH_INTERVAL = timedelta(hours=24)


class ChangeUnavailableError(RuntimeError):
    """Raised when exact change cannot be made from the current stock."""

    def __init__(self, amount_cents: int) -> None:
        super().__init__(f"cannot dispense exact change of {amount_cents} cents")
        self.amount_cents = amount_cents


def _greedy(stock: Mapping[int, int], amount_cents: int) -> tuple[dict[int, int], int]:
    """Take denominations largest first; return what was taken and what is left."""
    remaining = amount_cents
    taken: dict[int, int] = {}
    for denom in sorted(stock, reverse=True):
        if denom <= 0:
            continue
        count = min(stock[denom], remaining // denom)
        if count > 0:
            taken[denom] = count
            remaining -= denom * count
    return taken, remaining


class ChangeRepository:
    """Tracks denominations held by the machine and dispenses change."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock if clock is not None else datetime.now
        self._original = dict(_STARTING_STOCK)
        self._stock = dict(_STARTING_STOCK)
        self._last_replenish = self._clock() - REPLENISH_INTERVAL

    @property
    def denominations(self) -> dict[int, int]:
        """A copy of the current stock, denomination in cents to quantity."""
        return dict(self._stock)

    def accept_inserted_cash(
        self, inserted: Mapping[int, int], amount_due_cents: int
    ) -> None:
        """Keep only the inserted pieces needed to pay the amount due.

        Pieces are taken largest first, and only while they do not exceed
        what remains due; any shortfall is left unrecorded.
        """
        remaining = amount_due_cents
        for denom in sorted(inserted, reverse=True):
            available = inserted[denom]
            used = 0
            while available > 0 and remaining >= denom:
                remaining -= denom
                available -= 1
                used += 1
            self._stock[denom] = self._stock.get(denom, 0) + used

    def can_dispense(self, amount_cents: int) -> bool:
        """Return whether exact change can be made without touching the stock."""
        _, remaining = _greedy(self._stock, amount_cents)
        return remaining == 0

    def dispense_change(self, amount_cents: int) -> dict[int, int]:
        """Remove change from stock and return the pieces given out.

        Raises ChangeUnavailableError, leaving the stock untouched, if exact
        change cannot be made.
        """
        taken, remaining = _greedy(self._stock, amount_cents)
        if remaining != 0:
            raise ChangeUnavailableError(amount_cents)
        for denom, count in taken.items():
            self._stock[denom] -= count
        return taken

    def add_cash(self, denomination: int, count: int) -> None:
        self._stock[denomination] = self._stock.get(denomination, 0) + count

    @property
    def total_balance(self) -> int:
        """Total value of the stock in cents."""
        return sum(denom * qty for denom, qty in self._stock.items())

    @property
    def is_low(self) -> bool:
        return self.total_balance < LOW_THRESHOLD_CENTS

    def can_replenish(self) -> bool:
        """Return whether 24 hours have passed since the last replenishment."""
        return self._clock() - self._last_replenish >= REPLENISH_INTERVAL

    def replenish(self, display: UserDisplay) -> bool:
        """Restock every denomination below its starting level.

        Returns True if anything was restocked; the report or a notice is
        written to the display.
        """
        if not self.can_replenish():
            return False

        replenished: dict[int, int] = {}
        for denom, current in self._stock.items():
            target = self._original.get(denom, 0)
            if current < target:
                replenished[denom] = target - current
                self._stock[denom] = target

        if not replenished:
            display.show_message(
                "All denominations are already at full levels. Nothing to replenish."
            )
            return False

        display.show_replenishment_report(replenished)
        self._last_replenish = self._clock()
        return True