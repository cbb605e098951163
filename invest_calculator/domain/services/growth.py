"""Domain services for investment growth projections.

Every function is pure: it computes from its explicit arguments and returns
a new record. Inputs are expected to be validated beforehand
(see ``invest_calculator.domain.services.validation``).
"""

import math
from dataclasses import replace
from decimal import Decimal
from logging import Logger

from invest_calculator.domain.constants import (
    COMPOUND,
    DAYS_PER_MONTH,
    DAYS_PER_UNIT,
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
)
from invest_calculator.domain.models import (
    AccrualComparison,
    AccrualModel,
    DividendBreakdown,
    GrowthInput,
    GrowthResult,
    PeriodUnit,
)
from invest_calculator.utils.decimal_utils import coerce_decimal

_ZERO = Decimal("0")
_ONE = Decimal("1")
_HUNDRED = Decimal("100")
_HALF_YEAR = Decimal("0.5")


def convert_period_to_days(period, unit: PeriodUnit) -> Decimal:
    """Convert a period value and unit into idealized days.

    Args:
        period: Period value as entered (years, months or days).
        unit: ``year`` (x365), ``month`` (x30) or ``day`` (x1).

    Returns:
        Decimal: Duration in days, fractional values are kept.
    """
    return coerce_decimal(period) * DAYS_PER_UNIT.get(unit, 1)


def whole_months(days: Decimal) -> int:
    """Return the number of complete 30-day months in a duration."""
    return math.floor(coerce_decimal(days) / DAYS_PER_MONTH)


def whole_years(days: Decimal) -> int:
    """Return the number of complete 365-day years in a duration."""
    return math.floor(coerce_decimal(days) / DAYS_PER_YEAR)


def annuity_due_value(
    deposit: Decimal,
    monthly_rate: Decimal,
    months: int,
) -> Decimal:
    """Future value of deposits made at the start of each month.

    Args:
        deposit: Amount deposited every month.
        monthly_rate: Monthly rate as a fraction.
        months: Number of deposits.

    Returns:
        Decimal: Future value of the deposit stream.
    """
    if monthly_rate == 0:
        return deposit * months
    growth = (_ONE + monthly_rate) ** months
    return deposit * ((growth - _ONE) / monthly_rate) * (_ONE + monthly_rate)


def compute_simple_interest(
    principal: Decimal,
    deposit: Decimal,
    days: Decimal,
    rate_percent: Decimal,
) -> GrowthResult:
    """Project growth with simple interest and no dividends.

    The principal accrues over the full duration; the deposit made at the
    start of month ``i`` accrues over the remaining ``days - 30 * i`` days.

    Args:
        principal: Amount invested up front.
        deposit: Monthly deposit.
        days: Duration in days.
        rate_percent: Annual rate in percent.

    Returns:
        GrowthResult: Deposited, interest and final totals.
    """
    principal = coerce_decimal(principal)
    deposit = coerce_decimal(deposit)
    days = coerce_decimal(days)
    months = whole_months(days)
    years = days / DAYS_PER_YEAR
    annual_rate = coerce_decimal(rate_percent) / _HUNDRED

    principal_interest = principal * annual_rate * years
    deposit_interest = sum(
        (
            deposit * annual_rate * ((days - i * DAYS_PER_MONTH) / DAYS_PER_YEAR)
            for i in range(months)
        ),
        start=_ZERO,
    )

    total_deposited = principal + deposit * months
    total_interest = principal_interest + deposit_interest
    return GrowthResult(
        total_deposited=total_deposited,
        total_interest=total_interest,
        final_amount=total_deposited + total_interest,
        accrual_model="simple",
    )


def compute_compound_interest(
    principal: Decimal,
    deposit: Decimal,
    days: Decimal,
    rate_percent: Decimal,
) -> GrowthResult:
    """Project growth with monthly compounding and no dividends.

    Args:
        principal: Amount invested up front.
        deposit: Monthly deposit, made at the start of each month.
        days: Duration in days.
        rate_percent: Annual rate in percent.

    Returns:
        GrowthResult: Deposited, interest and final totals.
    """
    principal = coerce_decimal(principal)
    deposit = coerce_decimal(deposit)
    months = whole_months(days)
    monthly_rate = coerce_decimal(rate_percent) / _HUNDRED / MONTHS_PER_YEAR

    principal_value = principal * (_ONE + monthly_rate) ** months
    deposit_value = annuity_due_value(deposit, monthly_rate, months)

    final_amount = principal_value + deposit_value
    total_deposited = principal + deposit * months
    return GrowthResult(
        total_deposited=total_deposited,
        total_interest=final_amount - total_deposited,
        final_amount=final_amount,
        accrual_model="compound",
    )


def compute_dividend_reinvestment(
    principal: Decimal,
    deposit: Decimal,
    days: Decimal,
    rate_percent: Decimal,
    accrual_model: AccrualModel,
    dividend_rate_percent: Decimal,
    dividend_tax_rate_percent: Decimal,
    *,
    logger: Logger | None = None,
) -> GrowthResult:
    """Project growth with annual dividends reinvested into capital.

    Each complete year earns interest on the capital held at its start plus
    the interest on that year's deposits, then pays a dividend on capital
    plus the full annual deposit. The after-tax dividend is added back so
    the next year earns on it.

    ``total_deposited`` counts deposits per complete month while the loop
    only adds twelve deposits per complete year, so the two can differ when
    the duration is not a whole number of years. ``total_interest`` backs
    the net dividends out of total earnings; interest later earned on
    reinvested dividends stays in it.

    Durations shorter than a year pay no dividend; totals then fall back to
    the plain accrual model.

    Args:
        principal: Amount invested up front.
        deposit: Monthly deposit.
        days: Duration in days.
        rate_percent: Annual operating return in percent.
        accrual_model: ``simple`` or ``compound`` rule for yearly interest.
        dividend_rate_percent: Annual dividend yield in percent.
        dividend_tax_rate_percent: Flat dividend tax in percent.
        logger: Optional logger used for warnings.

    Returns:
        GrowthResult: Totals with a nested dividend breakdown.
    """
    principal = coerce_decimal(principal)
    deposit = coerce_decimal(deposit)
    days = coerce_decimal(days)
    annual_rate = coerce_decimal(rate_percent) / _HUNDRED
    dividend_rate = coerce_decimal(dividend_rate_percent) / _HUNDRED
    tax_rate = coerce_decimal(dividend_tax_rate_percent) / _HUNDRED
    tax_factor = _ONE - tax_rate
    years = whole_years(days)

    if years == 0:
        if logger is not None:
            logger.warning(
                f"Dividend reinvestment needs a full year, got {days} days; "
                "no dividend is paid"
            )
        plain = _compute_plain(principal, deposit, days, rate_percent, accrual_model)
        return replace(
            plain,
            dividend=DividendBreakdown(
                total_dividend_gross=_ZERO,
                tax=_ZERO,
                dividend_net_reinvested=_ZERO,
            ),
        )

    annual_deposit = deposit * MONTHS_PER_YEAR
    capital = principal
    total_gross = _ZERO
    total_tax = _ZERO
    for _ in range(years):
        year_interest = capital * annual_rate + _deposit_interest_for_year(
            deposit,
            annual_deposit,
            annual_rate,
            accrual_model,
        )
        dividend_gross = (capital + annual_deposit) * dividend_rate
        capital += annual_deposit + year_interest + dividend_gross * tax_factor
        total_gross += dividend_gross
        total_tax += dividend_gross * tax_rate

    total_deposited = principal + deposit * whole_months(days)
    total_earnings = capital - total_deposited
    return GrowthResult(
        total_deposited=total_deposited,
        total_interest=total_earnings - total_gross * tax_factor,
        final_amount=capital,
        accrual_model=accrual_model,
        dividend=DividendBreakdown(
            total_dividend_gross=total_gross,
            tax=total_tax,
            dividend_net_reinvested=total_gross - total_tax,
        ),
    )


def calculate_investment(
    growth_input: GrowthInput,
    *,
    logger: Logger | None = None,
) -> GrowthResult:
    """Route a growth request to the matching accrual computation.

    Args:
        growth_input: Validated growth inputs.
        logger: Optional logger forwarded to the dividend variant.

    Returns:
        GrowthResult: Uniform result, ``dividend`` set when requested.
    """
    if growth_input.dividend is not None:
        return compute_dividend_reinvestment(
            growth_input.principal,
            growth_input.periodic_deposit,
            growth_input.duration_days,
            growth_input.annual_rate_percent,
            growth_input.accrual_model,
            growth_input.dividend.rate_percent,
            growth_input.dividend.tax_rate_percent,
            logger=logger,
        )
    return _compute_plain(
        growth_input.principal,
        growth_input.periodic_deposit,
        growth_input.duration_days,
        growth_input.annual_rate_percent,
        growth_input.accrual_model,
    )


def compare_accrual_models(
    growth_input: GrowthInput,
    *,
    logger: Logger | None = None,
) -> AccrualComparison:
    """Compute the same request under both accrual models.

    Args:
        growth_input: Validated growth inputs; its model is ignored.
        logger: Optional logger forwarded to the computations.

    Returns:
        AccrualComparison: Simple and compound results side by side.
    """
    return AccrualComparison(
        simple=calculate_investment(
            replace(growth_input, accrual_model="simple"),
            logger=logger,
        ),
        compound=calculate_investment(
            replace(growth_input, accrual_model="compound"),
            logger=logger,
        ),
    )


def _compute_plain(
    principal: Decimal,
    deposit: Decimal,
    days: Decimal,
    rate_percent: Decimal,
    accrual_model: AccrualModel,
) -> GrowthResult:
    if accrual_model == COMPOUND:
        return compute_compound_interest(principal, deposit, days, rate_percent)
    return compute_simple_interest(principal, deposit, days, rate_percent)


def _deposit_interest_for_year(
    deposit: Decimal,
    annual_deposit: Decimal,
    annual_rate: Decimal,
    accrual_model: AccrualModel,
) -> Decimal:
    if accrual_model == COMPOUND:
        monthly_rate = annual_rate / MONTHS_PER_YEAR
        return (
            annuity_due_value(deposit, monthly_rate, MONTHS_PER_YEAR)
            - annual_deposit
        )
    # deposits land mid-year on average
    return annual_deposit * annual_rate * _HALF_YEAR


__all__ = [
    "convert_period_to_days",
    "whole_months",
    "whole_years",
    "annuity_due_value",
    "compute_simple_interest",
    "compute_compound_interest",
    "compute_dividend_reinvestment",
    "calculate_investment",
    "compare_accrual_models",
]
