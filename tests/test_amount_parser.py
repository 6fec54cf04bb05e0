"""Tests for amount parsing and formatting."""

from decimal import Decimal

import pytest

from reckon.utils.amount_parser import format_money, parse_amount


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("-123.45", Decimal("-123.45")),
        ("$-123.45", Decimal("-123.45")),
        ("-$123.45", Decimal("-123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("(123.45)", Decimal("-123.45")),
        ("123.45-", Decimal("-123.45")),
        ("12.50 EUR", Decimal("12.50")),
        ("£7", Decimal("7")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


def test_parse_amount_comma_separates_cents():
    assert parse_amount("1.234,56", comma_separates_cents=True) == Decimal("1234.56")
    assert parse_amount("$100,50", comma_separates_cents=True) == Decimal("100.50")


@pytest.mark.parametrize("text", ["", "   ", "abc", "$", "1-2-3"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)


def test_format_money_prefixed():
    assert format_money(Decimal("-12.5")) == "$-12.50"
    assert format_money(Decimal("12.50")) == "$12.50"
    assert format_money(Decimal("1234.567")) == "$1234.57"


def test_format_money_suffixed():
    assert format_money(Decimal("3"), "EUR", suffixed=True) == "3.00 EUR"


def test_format_money_negative_zero():
    assert format_money(Decimal("-0.001")) == "$0.00"
