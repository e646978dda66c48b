"""Terminal output for the self-checkout machine."""

from __future__ import annotations

import sys
import time
from collections.abc import Mapping
from typing import TextIO

from selfcheckout.product import Product

_HELP = (
    "\nCommands:\n"
    "  scan <productID> <quantity>\n"
    "  remove <itemNumber>\n"
    "  pay cash\n"
    "  pay card\n"
    "  list\n"
    "  cancel\n"
    "  help\n"
    "  exit\n\n"
    "  *** ADMIN ONLY ***\n"
    "  show change\n"
    "  replenish\n\n"
)

_BANNER = "*************************************\n"


class UserDisplay:
    """Writes prompts, messages and reports to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.stream.write(text)

    def show_welcome(self) -> None:
        self._write(_BANNER)
        self._write("Welcome to the Self-Checkout Machine!\n")
        self._write(_BANNER)
        self.show_help()

    def show_help(self) -> None:
        self._write(_HELP)

    def prompt(self) -> None:
        self._write("> ")

    def cash_prompt(self) -> None:
        self._write(">>enter cash>> ")

    def show_scanned(self, product: Product, quantity: int) -> None:
        self._write(
            f"Scanned: {product.description} x{quantity} @ ${product.price:.2f}\n"
        )

    def show_subtotal(self, subtotal: float) -> None:
        self._write(f"Subtotal: ${subtotal:.2f}\n")

    def show_tax(self, tax: float) -> None:
        self._write(f"Tax: ${tax:.2f}\n")

    def show_total(self, total: float) -> None:
        self._write(f"Total: ${total:.2f}\n")

    def show_change(self, change: float) -> None:
        self._write(f"Change returned: ${change:.2f}\n")

    def show_approval_code(self, code: str) -> None:
        self._write(f"Card approved with code: {code}\n")

    def show_message(self, message: str) -> None:
        self._write(f"{message}\n")

    def show_replenishment_report(self, replenished: Mapping[int, int]) -> None:
        """List, smallest denomination first, how many units were restocked."""
        self._write("[Replenishment Report]\n")
        for denom, added in sorted(replenished.items()):
            if added > 0:
                self._write(f"  ${denom / 100:.2f} -> added {added} units\n")

    def show_card_processing_animation(self) -> None:
        self._write("Processing")
        for _ in range(5):
            self._write(".")
            self.stream.flush()
            time.sleep(1)
        self._write("\n")
        self.stream.flush()

    def show_change_breakdown(self, dispensed: Mapping[int, int]) -> None:
        """List dispensed denominations, largest first."""
        lines = ["Change breakdown:\n"]
        lines.extend(
            f"  ${denom / 100:.2f} x {count}\n"
            for denom, count in sorted(dispensed.items(), reverse=True)
        )
        self.show_message("".join(lines))