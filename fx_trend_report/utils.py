"""Numeric and formatting helpers shared by the engine and the report layer."""

import math

from fx_trend_report.config import SUPPORTED_CURRENCIES


CURRENCY_SYMBOLS: dict[str, str] = {
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
}


def round_currency(value: float) -> float:
    """
    Round to two decimals, halves going up (towards positive infinity).

    The value is scaled to hundredths first, so 10.125 becomes 10.13.
    """
    scaled = value * 100
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return whole / 100


def percentage_change(old_value: float, new_value: float) -> float:
    """Percent change from old_value to new_value, capped at 100 when old_value is 0."""
    if old_value == 0:
        return 0.0 if new_value == 0 else 100.0
    return (new_value - old_value) / old_value * 100


def format_percentage(value: float) -> str:
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def format_currency(amount: float, currency: str = "EUR") -> str:
    """Format an amount with its currency symbol, e.g. €1,234.56."""
    code = currency.upper()
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{amount:,.2f} {code}"
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def validate_currency_code(code: str) -> bool:
    return code.upper() in SUPPORTED_CURRENCIES
