import math

import pytest

from chef_menu.errors import InvalidPriceError
from chef_menu.pricing import format_price, parse_price


@pytest.mark.parametrize(
    "text, expected",
    [
        ("49.99", 49.99),
        ("10", 10.0),
        ("0", 0.0),
        ("  7.5  ", 7.5),
        (".5", 0.5),
        ("3.", 3.0),
        ("+2", 2.0),
        ("1e2", 100.0),
    ],
)
def test_parse_price_accepts_plain_decimals(text, expected):
    assert parse_price(text) == expected


def test_negative_zero_is_zero():
    value = parse_price("-0")
    assert value == 0.0
    assert math.copysign(1.0, value) == 1.0


@pytest.mark.parametrize(
    "text",
    ["", "   ", "-5", "-0.01", "abc", "R10", "$10", "1,000", "1 000", "1_000", "nan", "inf", "-inf", "1e999", "49.99abc", ".", "١٢", "１２", "१०"],
)
def test_parse_price_rejects(text):
    with pytest.raises(InvalidPriceError):
        parse_price(text)


def test_format_price():
    assert format_price(49.99) == "R49.99"
    assert format_price(0) == "R0.00"
    assert format_price(12.5) == "R12.50"
