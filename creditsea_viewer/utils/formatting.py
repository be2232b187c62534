"""Currency and date display helpers"""

from datetime import datetime

from creditsea_viewer.config import settings


def group_digits_indian(digits: str) -> str:
    """Indian comma placement: last three digits, then pairs (12,34,567)"""
    if len(digits) <= 3:
        return digits

    last3 = digits[-3:]
    rest = digits[:-3]
    parts = []
    while len(rest) > 2:
        parts.append(rest[-2:])
        rest = rest[:-2]
    if rest:
        parts.append(rest)
    parts.reverse()
    return ",".join(parts) + "," + last3


def format_amount(amount: float) -> str:
    """Grouped amount; fractional values keep two decimals"""
    is_negative = amount < 0
    value = abs(amount)

    if float(value).is_integer():
        result = group_digits_indian(str(int(value)))
    else:
        whole, fraction = f"{value:.2f}".split(".")
        result = f"{group_digits_indian(whole)}.{fraction}"

    return f"-{result}" if is_negative else result


def format_currency(amount: float, symbol: str | None = None) -> str:
    """Fixed currency glyph followed by the grouped amount, e.g. '₹1,25,000'"""
    symbol = settings.currency_symbol if symbol is None else symbol
    return f"{symbol}{format_amount(amount)}"


def format_short_date(value: datetime, date_format: str | None = None) -> str:
    """Short date in the configured locale format (day first by default)"""
    return value.strftime(date_format or settings.date_format)
