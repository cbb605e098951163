"""Domain validation helpers run before the engines."""

from collections.abc import Sequence
from decimal import Decimal

from invest_calculator.domain.constants import (
    ACCRUAL_MODELS,
    MAX_DURATION_DAYS,
    MAX_RATE_PERCENT,
)
from invest_calculator.domain.errors import InvalidInputError
from invest_calculator.domain.models import GrowthInput, Lot

_HUNDRED = Decimal("100")


def validate_growth_input(growth_input: GrowthInput) -> None:
    """Reject growth inputs the engine cannot meaningfully compute.

    Args:
        growth_input: Inputs about to be passed to the growth engine.

    Raises:
        InvalidInputError: On the first invalid field.
    """
    if growth_input.duration_days <= 0:
        raise InvalidInputError("Duration must be positive", field="period")
    if growth_input.duration_days > MAX_DURATION_DAYS:
        raise InvalidInputError(
            f"Duration cannot exceed {MAX_DURATION_DAYS} days",
            field="period",
        )
    if growth_input.annual_rate_percent < 0:
        raise InvalidInputError("Rate cannot be negative", field="rate")
    if growth_input.annual_rate_percent > MAX_RATE_PERCENT:
        raise InvalidInputError(
            f"Rate cannot exceed {MAX_RATE_PERCENT}%",
            field="rate",
        )
    if growth_input.principal < 0 or growth_input.periodic_deposit < 0:
        raise InvalidInputError(
            "Amounts cannot be negative",
            field="principal" if growth_input.principal < 0 else "deposit",
        )
    if growth_input.principal == 0 and growth_input.periodic_deposit == 0:
        raise InvalidInputError(
            "Enter a principal or a monthly deposit",
            field="principal",
        )
    if growth_input.accrual_model not in ACCRUAL_MODELS:
        raise InvalidInputError(
            f"Unknown accrual model: {growth_input.accrual_model}",
            field="accrual_model",
        )
    dividend = growth_input.dividend
    if dividend is None:
        return
    if dividend.rate_percent <= 0:
        raise InvalidInputError(
            "Dividend rate must be positive when dividends are enabled",
            field="dividend_rate",
        )
    if not 0 <= dividend.tax_rate_percent <= _HUNDRED:
        raise InvalidInputError(
            "Dividend tax rate must be between 0 and 100",
            field="dividend_tax_rate",
        )


def validate_lots(lots: Sequence[Lot], kind: str = "buy") -> None:
    """Check purchase or sale lots.

    Args:
        lots: Lots entered by the caller.
        kind: ``buy`` or ``sell``, used in messages.

    Raises:
        InvalidInputError: If no lot is given or a lot is out of domain.
    """
    if not lots:
        raise InvalidInputError(f"At least one {kind} lot is required", field=kind)
    for index, lot in enumerate(lots, start=1):
        if lot.price <= 0:
            raise InvalidInputError(
                f"{kind.capitalize()} lot {index}: price must be positive",
                field=kind,
            )
        if lot.quantity < 0:
            raise InvalidInputError(
                f"{kind.capitalize()} lot {index}: quantity cannot be negative",
                field=kind,
            )


def validate_target_price(target_price: Decimal | None) -> Decimal:
    """Return the target price when it is positive.

    Raises:
        InvalidInputError: If the price is missing or not positive.
    """
    if target_price is None or target_price <= 0:
        raise InvalidInputError("Target price must be positive", field="target_price")
    return target_price


__all__ = ["validate_growth_input", "validate_lots", "validate_target_price"]
