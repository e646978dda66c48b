import random

import pytest

from selfcheckout.payment import InsufficientPaymentError, process_card, process_cash


class _FixedRng:
    def __init__(self, value):
        self.value = value
        self.stops = []

    def randrange(self, stop):
        self.stops.append(stop)
        return self.value


def test_exact_cash_gives_no_change():
    assert process_cash(5.0, 5.0) == 0.0


def test_cash_change_is_difference():
    assert process_cash(10.0, 20.0) == 10.0


def test_change_rounds_down_below_a_cent():
    assert process_cash(1.0, 1.009) == 0.0


def test_change_has_at_most_two_decimals():
    change = process_cash(3.33, 10.0)
    assert round(change * 100) == pytest.approx(change * 100)
    assert change <= 10.0 - 3.33


def test_insufficient_cash_raises():
    with pytest.raises(InsufficientPaymentError) as info:
        process_cash(10.0, 5.0)
    assert info.value.amount_due == 10.0
    assert info.value.cash_given == 5.0


def test_insufficient_payment_is_value_error():
    with pytest.raises(ValueError):
        process_cash(0.02, 0.01)


def test_card_code_uses_rng_value():
    rng = _FixedRng(42)
    assert process_card(12.5, rng) == "APPROVED-42"
    assert rng.stops == [1_000_000]


def test_card_code_in_range():
    rng = random.Random(7)
    for _ in range(50):
        code = process_card(1.0, rng)
        assert code.startswith("APPROVED-")
        assert 0 <= int(code.removeprefix("APPROVED-")) < 1_000_000


def test_card_code_reproducible_with_seed():
    first_rng = random.Random(1)
    second_rng = random.Random(1)
    first = [process_card(3.0, first_rng) for _ in range(5)]
    second = [process_card(3.0, second_rng) for _ in range(5)]
    assert all(code.startswith("APPROVED-") for code in first)
    assert first == second


def test_card_default_rng_format():
    code = process_card(9.99)
    assert code.startswith("APPROVED-")
    assert code.removeprefix("APPROVED-").isdigit()