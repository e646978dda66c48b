import io

import pytest

from selfcheckout.cart import Cart, CartItem
from selfcheckout.product import Product

STEAK = Product("Meat01", "T-Bone Steak", 7.99)
ICECREAM = Product("Icecream01", "Chocolate Ice Cream", 2.50)
MILK = Product("Milk01", "Gallon Milk", 4.00)


@pytest.fixture
def cart():
    c = Cart()
    c.add_item(STEAK, 1)
    c.add_item(ICECREAM, 2)
    c.add_item(MILK, 3)
    return c


def test_new_cart_is_empty():
    c = Cart()
    assert c.is_empty
    assert len(c) == 0
    assert c.subtotal == 0


def test_items_numbered_sequentially(cart):
    assert [item.item_number for item in cart] == [1, 2, 3]
    assert not cart.is_empty


def test_remove_renumbers(cart):
    assert cart.remove_item(2) is True
    assert [item.item_number for item in cart] == [1, 2]
    assert [item.product.id for item in cart] == ["Meat01", "Milk01"]


def test_remove_unknown_number(cart):
    assert cart.remove_item(9) is False
    assert len(cart) == 3


def test_remove_all_empties_cart(cart):
    for _ in range(3):
        assert cart.remove_item(1)
    assert cart.is_empty


def test_subtotal_is_sum_of_item_totals(cart):
    assert cart.subtotal == pytest.approx(sum(i.total_price for i in cart))


def test_item_total_scales_with_quantity():
    one = CartItem(ICECREAM, 1)
    two = CartItem(ICECREAM, 2)
    assert two.total_price == pytest.approx(2 * one.total_price)


def test_describe():
    assert CartItem(ICECREAM, 2, 1).describe() == (
        "Chocolate Ice Cream x2 @ $2.50 = $5.00"
    )


def test_format_line_prefix(cart):
    first = next(iter(cart))
    assert first.format_line().startswith(" 1. Meat01 | T-Bone Steak x1")


def test_print_items_one_line_each(cart):
    out = io.StringIO()
    cart.print_items(out)
    lines = out.getvalue().splitlines()
    assert lines == [item.format_line() for item in cart]


def test_receipt_without_payment_details(cart):
    out = io.StringIO()
    cart.write_receipt(out)
    text = out.getvalue()
    assert text.startswith("\n--- RECEIPT ---\n")
    assert text.endswith("\nThank you for shopping!\n")
    assert "Payment Method" not in text
    assert "Approval Code" not in text
    for item in cart:
        assert item.describe() + "\n" in text


def test_receipt_with_payment_details(cart):
    out = io.StringIO()
    cart.write_receipt(out, 5, 0.25, 5.25, 5.25, 0, "card", "APPROVED-42")
    text = out.getvalue()
    assert "Subtotal: $5.00\n" in text
    assert "Payment Method: card\n" in text
    assert "Approval Code:  APPROVED-42\n" in text
    assert text.index("Total:    $") < text.index("Paid:     $")
    assert text.index("Paid:     $") < text.index("Change:   $")