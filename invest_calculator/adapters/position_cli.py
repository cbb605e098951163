"""CLI adapter settling a stock position against a target or staged exit.

Lots are given as ``PRICE:QUANTITY``::

    invest-position --buy 10,000:10 --buy 9,000:5 --target 12,000
    invest-position --amount 1,000,000 --price 10,000 --sell 12,000:50
"""

import argparse
from collections.abc import Sequence

from invest_calculator.adapters.formatting import (
    format_currency,
    format_percent,
    format_shares,
    format_signed_currency,
)
from invest_calculator.application.use_cases.evaluate_position import (
    EvaluatePositionUseCase,
)
from invest_calculator.domain.errors import CalculatorError, InvalidInputError
from invest_calculator.domain.models import Lot
from invest_calculator.domain.services.normalization import (
    parse_amount_text,
    parse_quantity_text,
)
from invest_calculator.infrastructure.logging.logger import get_app_logger
from invest_calculator.infrastructure.settings import CalculatorSettings


def parse_lot(raw: str, kind: str = "buy") -> Lot:
    """Parse a ``PRICE:QUANTITY`` lot argument.

    Raises:
        InvalidInputError: If the value is not a price and a quantity.
    """
    price_text, separator, quantity_text = raw.partition(":")
    if not separator:
        raise InvalidInputError(
            f"Expected PRICE:QUANTITY for {kind} lot, got {raw!r}",
            field=kind,
        )
    return Lot(
        price=parse_amount_text(price_text, field=kind),
        quantity=parse_quantity_text(quantity_text, field=kind),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invest-position",
        description="Compute average cost and profit/loss of a position.",
    )
    parser.add_argument(
        "--buy",
        action="append",
        default=[],
        metavar="PRICE:QTY",
        help="Purchase lot, repeat for split buys",
    )
    parser.add_argument("--amount", default=None, help="Amount invested")
    parser.add_argument("--price", default=None, help="Purchase price")
    parser.add_argument("--target", default=None, help="Target exit price")
    parser.add_argument(
        "--sell",
        action="append",
        default=[],
        metavar="PRICE:QTY",
        help="Sale lot, repeat for split sells",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the position settlement and print the result.

    Returns:
        int: Process exit code, 1 on invalid input or over-selling.
    """
    logger = get_app_logger()
    currency = CalculatorSettings.from_env().currency_code
    args = build_parser().parse_args(argv)

    try:
        buy_lots = [parse_lot(raw, kind="buy") for raw in args.buy]
        sell_lots = [parse_lot(raw, kind="sell") for raw in args.sell]
        evaluation = EvaluatePositionUseCase(logger=logger).execute(
            buy_lots=buy_lots,
            investment_amount=parse_amount_text(args.amount, field="amount"),
            purchase_price=parse_amount_text(args.price, field="price"),
            target_price=(
                parse_amount_text(args.target, field="target_price")
                if args.target is not None
                else None
            ),
            sell_lots=sell_lots,
        )
    except CalculatorError as exc:
        logger.error(f"Position calculation rejected: {exc}")
        print(f"Error: {exc}")
        return 1

    position = evaluation.position
    pnl = evaluation.pnl
    print(f"Average cost: {format_currency(position.average_cost, currency)}")
    print(f"Total shares: {format_shares(position.total_shares)}")
    print(f"Total cost: {format_currency(position.total_cost, currency)}")
    print(f"Shares sold: {format_shares(evaluation.sold_shares)}")
    print(f"Exit value: {format_currency(pnl.exit_value, currency)}")
    print(
        f"Profit/loss: {format_signed_currency(pnl.profit_loss_amount, currency)} "
        f"({format_percent(pnl.profit_loss_rate_percent)})"
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
