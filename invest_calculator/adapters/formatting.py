"""Display formatting shared by the CLI and Streamlit adapters."""

from decimal import Decimal

from invest_calculator.utils.decimal_utils import (
    CENT,
    WHOLE_UNIT,
    round_half_up,
    round_rate,
)

CURRENCY_SYMBOLS = {
    "KRW": "₩",
    "EUR": "€",
    "USD": "$",
    "JPY": "¥",
}
WHOLE_UNIT_CURRENCIES = {"KRW", "JPY"}


def format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display.

    Won and yen are shown in whole units, other currencies with cents.
    """
    symbol = CURRENCY_SYMBOLS.get(currency_code, currency_code)
    if currency_code in WHOLE_UNIT_CURRENCIES:
        return f"{round_half_up(value, WHOLE_UNIT):,.0f} {symbol}"
    return f"{round_half_up(value, CENT):,.2f} {symbol}"


def format_signed_currency(value: Decimal, currency_code: str) -> str:
    """Format an amount with an explicit sign."""
    sign = "+" if value > 0 else ""
    return f"{sign}{format_currency(value, currency_code)}"


def format_percent(value: Decimal) -> str:
    """Format a signed percentage with two decimals."""
    rounded = round_rate(value)
    sign = "+" if rounded > 0 else ""
    return f"{sign}{rounded:.2f}%"


def format_shares(value: Decimal) -> str:
    """Format a share count, trimming decimals for whole numbers."""
    if value == value.to_integral_value():
        return f"{value:,.0f}"
    return f"{round_half_up(value, Decimal('0.0001')):,.4f}"


__all__ = [
    "format_currency",
    "format_signed_currency",
    "format_percent",
    "format_shares",
]
