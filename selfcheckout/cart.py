"""Shopping cart of scanned products."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from selfcheckout.product import Product


@dataclass
class CartItem:
    """A product in the cart with its quantity and position number."""

    product: Product
    quantity: int
    item_number: int = 0

    @property
    def total_price(self) -> float:
        return self.product.price * self.quantity

    def describe(self) -> str:
        """Return the receipt line for this item."""
        return (
            f"{self.product.description} x{self.quantity}"
            f" @ ${self.product.price:.2f} = ${self.total_price:.2f}"
        )

    def format_line(self) -> str:
        """Return the numbered listing line for this item."""
        return (
            f"{self.item_number:>2}. {self.product.id} | "
            f"{self.product.description} x{self.quantity}"
            f" @ ${self.product.price:.2f} = ${self.total_price:.2f}"
        )


class Cart:
    """An ordered collection of cart items numbered from 1."""

    def __init__(self) -> None:
        self._items: list[CartItem] = []

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def renumber_items(self) -> None:
        for number, item in enumerate(self._items, start=1):
            item.item_number = number

    def add_item(self, product: Product, quantity: int) -> CartItem:
        item = CartItem(product, quantity)
        self._items.append(item)
        self.renumber_items()
        return item

    def remove_item(self, item_number: int) -> bool:
        """Remove items with this number; return whether any were removed."""
        kept = [item for item in self._items if item.item_number != item_number]
        removed = len(kept) != len(self._items)
        self._items = kept
        self.renumber_items()
        return removed

    def print_items(self, stream: TextIO | None = None) -> None:
        out = stream if stream is not None else sys.stdout
        for item in self._items:
            out.write(item.format_line() + "\n")

    def write_receipt(
        self,
        stream: TextIO,
        subtotal: float = 0.0,
        tax: float = 0.0,
        total: float = 0.0,
        paid: float = 0.0,
        change: float = 0.0,
        method: str = "",
        approval_code: str = "",
    ) -> None:
        stream.write("\n--- RECEIPT ---\n")
        for item in self._items:
            stream.write(item.describe() + "\n")
        stream.write("-------------------\n")
        stream.write(f"Subtotal: ${subtotal:.2f}\n")
        stream.write(f"Tax:      ${tax:.2f}\n")
        stream.write(f"Total:    ${total:.2f}\n")
        stream.write(f"Paid:     ${paid:.2f}\n")
        stream.write(f"Change:   ${change:.2f}\n")
        if method:
            stream.write(f"Payment Method: {method}\n")
        if approval_code:
            stream.write(f"Approval Code:  {approval_code}\n")
        stream.write("\nThank you for shopping!\n")

    @property
    def subtotal(self) -> float:
        return sum(item.total_price for item in self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items