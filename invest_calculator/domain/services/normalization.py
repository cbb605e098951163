"""Domain normalization helpers for raw form and CLI values."""

from decimal import Decimal, InvalidOperation

from invest_calculator.domain.constants import ACCRUAL_MODELS, PERIOD_UNITS
from invest_calculator.domain.errors import InvalidInputError
from invest_calculator.domain.models import AccrualModel, PeriodUnit

_SEPARATORS = (",", " ", "_", "\u00a0")


def parse_amount_text(text: str | None, field: str | None = None) -> Decimal:
    """Parse thousands-separated numeric text into a Decimal.

    Args:
        text: Raw text such as ``"1,000,000"``; empty means zero.
        field: Optional field name reported on errors.

    Returns:
        Decimal: Parsed value.

    Raises:
        InvalidInputError: If the text is not a number.
    """
    if text is None:
        return Decimal("0")
    cleaned = str(text).strip()
    for separator in _SEPARATORS:
        cleaned = cleaned.replace(separator, "")
    if not cleaned:
        return Decimal("0")
    try:
        value = Decimal(cleaned)
    except InvalidOperation as exc:
        raise InvalidInputError(f"Not a number: {text!r}", field=field) from exc
    if not value.is_finite():
        raise InvalidInputError(f"Not a finite number: {text!r}", field=field)
    return value


def parse_quantity_text(text: str | None, field: str | None = None) -> int:
    """Parse a share count; fractions are rejected."""
    value = parse_amount_text(text, field=field)
    if value != value.to_integral_value():
        raise InvalidInputError(
            f"Quantity must be a whole number: {text!r}",
            field=field,
        )
    return int(value)


def normalize_period_unit(unit: str | None) -> PeriodUnit:
    """Normalize a period unit to ``year``, ``month`` or ``day``.

    Raises:
        InvalidInputError: If the unit is unknown.
    """
    cleaned = (unit or "").strip().lower().rstrip("s")
    if cleaned not in PERIOD_UNITS:
        raise InvalidInputError(f"Unknown period unit: {unit!r}", field="period_unit")
    return cleaned


def normalize_accrual_model(model: str | None) -> AccrualModel:
    """Normalize an accrual model to ``simple`` or ``compound``.

    Raises:
        InvalidInputError: If the model is unknown.
    """
    cleaned = (model or "").strip().lower()
    if cleaned not in ACCRUAL_MODELS:
        raise InvalidInputError(
            f"Unknown accrual model: {model!r}",
            field="accrual_model",
        )
    return cleaned


__all__ = [
    "parse_amount_text",
    "parse_quantity_text",
    "normalize_period_unit",
    "normalize_accrual_model",
]
