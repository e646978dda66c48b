# selfcheckout

This package models the parts of a self-checkout machine. It has no outside dependencies. It holds these modules:

- `selfcheckout.product` holds `Product` and `ProductDatabase`.
  - `Product` is a frozen dataclass with the fields `id`, `description` and `price`.
  - `ProductDatabase` holds a small built-in catalogue. It supports `in` checks by product ID. `lookup(product_id)` returns the matching product, or an empty `Product()` if the ID is unknown.
- `selfcheckout.cart` holds `Cart` and `CartItem`.
  - `Cart.add_item` returns the new `CartItem`.
  - The cart numbers its items from 1. It renumbers them after every `add_item` and `remove_item`. `remove_item` returns whether anything was removed.
  - `Cart.subtotal` and `Cart.is_empty` are properties. The cart supports `len()` and iteration.
  - `print_items` writes numbered item lines. `write_receipt` writes a receipt to a text stream.
- `selfcheckout.payment` holds the payment functions.
  - `process_cash(amount_due, cash_given)` returns the change, rounded down to the cent. If the cash is short, it raises `InsufficientPaymentError`.
  - `process_card(amount_due, rng=None)` returns an approval code of the form `APPROVED-<n>`, where `n` is below 1,000,000.
- `selfcheckout.change_repository` holds `ChangeRepository`, which tracks the coins and notes held, in cents. It starts with $200 of stock.
  - `accept_inserted_cash` keeps only the inserted pieces needed to pay the amount due.
  - `can_dispense` checks whether exact change can be made. `dispense_change` gives out change greedily, largest denomination first. If exact change cannot be made, it raises `ChangeUnavailableError` and leaves the stock untouched.
  - `total_balance` and `is_low` are properties. `is_low` means the stock is below $50.
  - `replenish(display)` restocks every denomination that is below its starting level. It does so at most once every 24 hours. A clock function can be passed to the constructor.
- `selfcheckout.display` holds `UserDisplay`, which writes all customer-facing messages to a text stream. The default stream is standard output.

## Installation

```
pip install .
```

## Example

```python
import sys

from selfcheckout.cart import Cart
from selfcheckout.change_repository import ChangeRepository, ChangeUnavailableError
from selfcheckout.display import UserDisplay
from selfcheckout.payment import process_cash
from selfcheckout.product import ProductDatabase

db = ProductDatabase()
display = UserDisplay(sys.stdout)
cart = Cart()

if "Milk01" in db:
    milk = db.lookup("Milk01")
    cart.add_item(milk, 2)
    display.show_scanned(milk, 2)

subtotal = cart.subtotal
tax = subtotal * 0.05
total = subtotal + tax
display.show_total(total)

change = process_cash(total, 10.00)
repo = ChangeRepository()
try:
    dispensed = repo.dispense_change(round(change * 100))
    display.show_change_breakdown(dispensed)
except ChangeUnavailableError:
    display.show_message("Exact change unavailable.")

cart.write_receipt(sys.stdout, subtotal, tax, total, 10.00, change, "Cash", "")
```

## What it does not do

The package supplies the building blocks only.

- It has no command interpreter and no interactive loop. `UserDisplay.show_help` prints a list of commands such as `scan`, `pay cash` and `replenish`, but nothing in the package reads or carries out those commands.
- Tax, the checkout flow and receipt files are left to the caller.

## Tests

```
pip install .[test]
pytest
```