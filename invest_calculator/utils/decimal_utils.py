"""Helpers for Decimal normalization and display rounding."""

from decimal import ROUND_HALF_UP, Decimal

WHOLE_UNIT = Decimal("1")
CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a form, CLI or caller.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: Decimal, step: Decimal = WHOLE_UNIT) -> Decimal:
    """Round a value to the given step using half-up rounding.

    Args:
        value: Value to round.
        step: Quantization step (``Decimal("1")`` or ``Decimal("0.01")``).

    Returns:
        Decimal: Rounded value.
    """
    return coerce_decimal(value).quantize(step, rounding=ROUND_HALF_UP)


def round_rate(value: Decimal) -> Decimal:
    """Round a percentage to two decimals for display."""
    return round_half_up(value, CENT)


__all__ = ["coerce_decimal", "round_half_up", "round_rate", "WHOLE_UNIT", "CENT"]
