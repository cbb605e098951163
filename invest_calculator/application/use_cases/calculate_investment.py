"""Use case to project the growth of a periodic-deposit investment."""

from dataclasses import dataclass
from decimal import Decimal

from invest_calculator.domain.models import (
    DividendSettings,
    GrowthInput,
    GrowthResult,
)
from invest_calculator.domain.services.growth import (
    calculate_investment,
    convert_period_to_days,
)
from invest_calculator.domain.services.normalization import (
    normalize_accrual_model,
    normalize_period_unit,
)
from invest_calculator.domain.services.validation import validate_growth_input
from invest_calculator.infrastructure.logging.logger import get_app_logger
from invest_calculator.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class GrowthRequest:
    """Raw growth request as collected by a form or CLI.

    Attributes:
        period: Period value expressed in ``period_unit``.
        period_unit: ``year``, ``month`` or ``day``.
        principal: Amount invested up front.
        monthly_deposit: Amount deposited every month.
        rate_percent: Annual operating return in percent.
        accrual_model: ``simple`` or ``compound``.
        include_dividend: Whether dividends are paid and reinvested.
        dividend_rate_percent: Dividend yield, used with dividends only.
        dividend_tax_rate_percent: Dividend tax, used with dividends only.
    """

    period: Decimal
    period_unit: str
    principal: Decimal
    monthly_deposit: Decimal
    rate_percent: Decimal
    accrual_model: str = "simple"
    include_dividend: bool = False
    dividend_rate_percent: Decimal = Decimal("0")
    dividend_tax_rate_percent: Decimal = Decimal("0")


def build_growth_input(request: GrowthRequest) -> GrowthInput:
    """Convert and validate a raw request into engine inputs.

    Args:
        request: Raw growth request.

    Returns:
        GrowthInput: Validated engine inputs.

    Raises:
        InvalidInputError: If any field is invalid.
    """
    unit = normalize_period_unit(request.period_unit)
    dividend = None
    if request.include_dividend:
        dividend = DividendSettings(
            rate_percent=coerce_decimal(request.dividend_rate_percent),
            tax_rate_percent=coerce_decimal(request.dividend_tax_rate_percent),
        )
    growth_input = GrowthInput(
        principal=coerce_decimal(request.principal),
        periodic_deposit=coerce_decimal(request.monthly_deposit),
        duration_days=convert_period_to_days(request.period, unit),
        annual_rate_percent=coerce_decimal(request.rate_percent),
        accrual_model=normalize_accrual_model(request.accrual_model),
        dividend=dividend,
    )
    validate_growth_input(growth_input)
    return growth_input


class CalculateInvestmentUseCase:
    """Project deposits, interest and dividends for a growth request."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(self, request: GrowthRequest) -> GrowthResult:
        """Return the projected totals.

        Args:
            request: Raw growth request.

        Returns:
            GrowthResult: Totals for the requested accrual model.

        Raises:
            InvalidInputError: If the request is invalid.
        """
        growth_input = build_growth_input(request)
        result = calculate_investment(growth_input, logger=self._logger)
        self._logger.info(
            f"Growth computed: model={growth_input.accrual_model}, "
            f"days={growth_input.duration_days}, "
            f"deposited={result.total_deposited}, "
            f"interest={result.total_interest}, final={result.final_amount}"
        )
        if result.dividend is not None:
            self._logger.info(
                f"Dividends reinvested: gross={result.dividend.total_dividend_gross}, "
                f"tax={result.dividend.tax}"
            )
        return result


__all__ = [
    "CalculateInvestmentUseCase",
    "GrowthRequest",
    "GrowthResult",
    "build_growth_input",
]
