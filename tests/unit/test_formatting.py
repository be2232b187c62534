"""Unit tests for currency and date formatting"""

from datetime import datetime

from creditsea_viewer.utils.formatting import (
    format_amount,
    format_currency,
    format_short_date,
    group_digits_indian,
)


def test_indian_digit_grouping():
    assert group_digits_indian("0") == "0"
    assert group_digits_indian("999") == "999"
    assert group_digits_indian("1000") == "1,000"
    assert group_digits_indian("100000") == "1,00,000"
    assert group_digits_indian("1234567") == "12,34,567"
    assert group_digits_indian("18572860") == "1,85,72,860"


def test_format_amount_whole_and_fractional():
    assert format_amount(1245000) == "12,45,000"
    assert format_amount(1245000.0) == "12,45,000"
    assert format_amount(245000.5) == "2,45,000.50"
    assert format_amount(-4500) == "-4,500"


def test_format_currency_prefixes_glyph():
    assert format_currency(0) == "₹0"
    assert format_currency(125000) == "₹1,25,000"
    assert format_currency(10, symbol="Rs ") == "Rs 10"


def test_format_short_date():
    created = datetime(2024, 9, 3, 10, 15)
    assert format_short_date(created) == "03/09/2024"
    assert format_short_date(created, "%Y-%m-%d") == "2024-09-03"
