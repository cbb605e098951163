"""CLI adapter projecting the growth of a periodic-deposit investment.

Example::

    invest-growth --principal 1,000,000 --deposit 100,000 --period 3 \\
        --unit year --rate 5 --model compound --dividend-rate 3
"""

import argparse
from collections.abc import Sequence

from invest_calculator.adapters.formatting import format_currency
from invest_calculator.application.use_cases.calculate_investment import (
    CalculateInvestmentUseCase,
    GrowthRequest,
)
from invest_calculator.application.use_cases.compare_accrual_models import (
    CompareAccrualModelsUseCase,
)
from invest_calculator.domain.errors import CalculatorError
from invest_calculator.domain.services.normalization import parse_amount_text
from invest_calculator.infrastructure.logging.logger import get_app_logger
from invest_calculator.infrastructure.settings import CalculatorSettings


def build_parser(settings: CalculatorSettings) -> argparse.ArgumentParser:
    """Return the argument parser using settings for defaults."""
    parser = argparse.ArgumentParser(
        prog="invest-growth",
        description="Project deposits, interest and dividends.",
    )
    parser.add_argument("--principal", default="0", help="Initial amount")
    parser.add_argument("--deposit", default="0", help="Monthly deposit")
    parser.add_argument("--period", required=True, help="Duration value")
    parser.add_argument(
        "--unit",
        default="year",
        choices=["year", "month", "day"],
        help="Duration unit",
    )
    parser.add_argument("--rate", required=True, help="Annual rate in percent")
    parser.add_argument(
        "--model",
        default=settings.accrual_model,
        choices=["simple", "compound"],
        help="Accrual model",
    )
    parser.add_argument(
        "--dividend-rate",
        default=None,
        help="Dividend yield in percent; enables reinvestment",
    )
    parser.add_argument(
        "--dividend-tax",
        default=str(settings.dividend_tax_rate),
        help="Dividend tax rate in percent",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Also print simple vs compound final amounts",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the growth projection and print the result.

    Returns:
        int: Process exit code, 1 on invalid input.
    """
    logger = get_app_logger()
    settings = CalculatorSettings.from_env()
    args = build_parser(settings).parse_args(argv)
    currency = settings.currency_code

    try:
        request = GrowthRequest(
            period=parse_amount_text(args.period, field="period"),
            period_unit=args.unit,
            principal=parse_amount_text(args.principal, field="principal"),
            monthly_deposit=parse_amount_text(args.deposit, field="deposit"),
            rate_percent=parse_amount_text(args.rate, field="rate"),
            accrual_model=args.model,
            include_dividend=args.dividend_rate is not None,
            dividend_rate_percent=parse_amount_text(
                args.dividend_rate,
                field="dividend_rate",
            ),
            dividend_tax_rate_percent=parse_amount_text(
                args.dividend_tax,
                field="dividend_tax_rate",
            ),
        )
        result = CalculateInvestmentUseCase(logger=logger).execute(request)
        comparison = (
            CompareAccrualModelsUseCase(logger=logger).execute(request)
            if args.compare
            else None
        )
    except CalculatorError as exc:
        logger.error(f"Growth calculation rejected: {exc}")
        print(f"Error: {exc}")
        return 1

    print(f"Accrual model: {result.accrual_model}")
    print(f"Total deposited: {format_currency(result.total_deposited, currency)}")
    print(f"Total interest: {format_currency(result.total_interest, currency)}")
    if result.dividend is not None:
        dividend = result.dividend
        print(
            "Dividends (gross/tax/net): "
            f"{format_currency(dividend.total_dividend_gross, currency)} / "
            f"{format_currency(dividend.tax, currency)} / "
            f"{format_currency(dividend.dividend_net_reinvested, currency)}"
        )
    print(f"Final amount: {format_currency(result.final_amount, currency)}")
    if comparison is not None:
        print(
            "Simple vs compound: "
            f"{format_currency(comparison.simple_final_amount, currency)} vs "
            f"{format_currency(comparison.compound_final_amount, currency)} "
            f"(better: {comparison.better_model or 'equal'}, "
            f"difference: {format_currency(comparison.difference, currency)})"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
