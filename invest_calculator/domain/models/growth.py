"""Domain models for investment growth projections."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

AccrualModel = Literal["simple", "compound"]
PeriodUnit = Literal["year", "month", "day"]


@dataclass(frozen=True)
class DividendSettings:
    """Dividend parameters for the reinvestment variant.

    Attributes:
        rate_percent: Annual dividend yield in percent.
        tax_rate_percent: Flat dividend tax rate in percent (0-100).
    """

    rate_percent: Decimal
    tax_rate_percent: Decimal = Decimal("0")


@dataclass(frozen=True)
class GrowthInput:
    """Validated inputs for a growth projection.

    Attributes:
        principal: Amount invested up front.
        periodic_deposit: Amount deposited at the start of every month.
        duration_days: Investment duration in idealized days.
        annual_rate_percent: Annual operating return in percent.
        accrual_model: ``simple`` or ``compound``.
        dividend: Dividend settings, or None when dividends are disabled.
    """

    principal: Decimal
    periodic_deposit: Decimal
    duration_days: Decimal
    annual_rate_percent: Decimal
    accrual_model: AccrualModel = "simple"
    dividend: DividendSettings | None = None


@dataclass(frozen=True)
class DividendBreakdown:
    """Dividend totals accumulated over the reinvestment years."""

    total_dividend_gross: Decimal
    tax: Decimal
    dividend_net_reinvested: Decimal


@dataclass(frozen=True)
class GrowthResult:
    """Projected totals for a growth request.

    Attributes:
        total_deposited: Principal plus every monthly deposit.
        total_interest: Operating return, net dividends backed out.
        final_amount: Amount at the end of the duration.
        accrual_model: Model used to compute the result.
        dividend: Dividend totals when dividends were requested.
    """

    total_deposited: Decimal
    total_interest: Decimal
    final_amount: Decimal
    accrual_model: AccrualModel = "simple"
    dividend: DividendBreakdown | None = None


@dataclass(frozen=True)
class AccrualComparison:
    """Side-by-side final amounts under both accrual models."""

    simple: GrowthResult
    compound: GrowthResult

    @property
    def simple_final_amount(self) -> Decimal:
        return self.simple.final_amount

    @property
    def compound_final_amount(self) -> Decimal:
        return self.compound.final_amount

    @property
    def difference(self) -> Decimal:
        """Return the absolute gap between both final amounts."""
        return abs(self.compound_final_amount - self.simple_final_amount)

    @property
    def better_model(self) -> AccrualModel | None:
        """Return the model with the larger final amount, None on a tie."""
        if self.compound_final_amount > self.simple_final_amount:
            return "compound"
        if self.simple_final_amount > self.compound_final_amount:
            return "simple"
        return None


__all__ = [
    "AccrualModel",
    "PeriodUnit",
    "DividendSettings",
    "GrowthInput",
    "DividendBreakdown",
    "GrowthResult",
    "AccrualComparison",
]
