"""
Rounding tests — currency step rounding.

Tests:
1. USD rounds to the nearest 5
2. Other currencies round to the nearest 10
3. Halfway values round up
4. Results are always multiples of the step
"""

import pytest

from freelance_pricing.rounding import round_half_up, round_price


@pytest.mark.parametrize("value,expected", [
    (123, 125),
    (122, 120),
    (127, 125),
    (350, 350),
    (0, 0),
])
def test_usd_rounds_to_five(value, expected):
    assert round_price(value, "USD") == expected


@pytest.mark.parametrize("currency,value,expected", [
    ("SAR", 123, 120),
    ("SAR", 127, 130),
    ("EUR", 125, 130),
    ("EGP", 1284, 1280),
])
def test_other_currencies_round_to_ten(currency, value, expected):
    assert round_price(value, currency) == expected


def test_default_currency_is_usd():
    assert round_price(122.5) == 125


def test_halfway_rounds_up():
    """297.5 is 59.5 steps of 5: rounds up, not to even."""
    assert round_price(297.5, "USD") == 300
    assert round_price(187.5, "USD") == 190
    assert round_half_up(2.5) == 3
    assert round_half_up(24.48) == 24


def test_currency_match_is_exact():
    """Only the exact code "USD" gets the 5 step."""
    assert round_price(123, "usd") == 120


@pytest.mark.parametrize("currency,step", [("USD", 5), ("EUR", 10), ("AED", 10)])
def test_results_are_multiples_of_step(currency, step):
    for value in (0.4, 17.3, 99.99, 437.5, 1287.9999999, 10001.2):
        assert round_price(value, currency) % step == 0
