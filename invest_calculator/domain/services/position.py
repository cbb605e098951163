"""Domain services for stock position profit and loss."""

from collections.abc import Iterable
from decimal import Decimal

from invest_calculator.domain.errors import InvalidInputError, OverSellError
from invest_calculator.domain.models import Lot, PnLResult, PositionState
from invest_calculator.utils.decimal_utils import coerce_decimal

_ZERO = Decimal("0")
_ONE = Decimal("1")
_HUNDRED = Decimal("100")


def aggregate_lots(lots: Iterable[Lot]) -> PositionState:
    """Aggregate purchase lots into a position.

    Args:
        lots: Purchase lots, order is irrelevant.

    Returns:
        PositionState: Totals and blended average cost (0 without shares).
    """
    total_cost = _ZERO
    total_shares = _ZERO
    for lot in lots:
        total_cost += lot.amount
        total_shares += lot.quantity
    return _position(total_cost, total_shares)


def position_from_investment(
    investment_amount: Decimal,
    purchase_price: Decimal,
) -> PositionState:
    """Build a position from an amount invested at a single price.

    Shares are derived as ``amount / price`` and may be fractional.

    Args:
        investment_amount: Total amount invested.
        purchase_price: Price paid per share.

    Returns:
        PositionState: Position, empty when the price is not positive.
    """
    investment_amount = coerce_decimal(investment_amount)
    purchase_price = coerce_decimal(purchase_price)
    if purchase_price <= 0:
        return _position(_ZERO, _ZERO)
    return _position(investment_amount, investment_amount / purchase_price)


def derive_target_rate(average_cost: Decimal, target_price: Decimal) -> Decimal:
    """Return the percent gain of a target price over the average cost."""
    average_cost = _require_positive_cost(average_cost)
    target_price = coerce_decimal(target_price)
    return (target_price - average_cost) / average_cost * _HUNDRED


def derive_target_price(average_cost: Decimal, rate_percent: Decimal) -> Decimal:
    """Return the price reaching a percent gain over the average cost."""
    average_cost = _require_positive_cost(average_cost)
    return average_cost * (_ONE + coerce_decimal(rate_percent) / _HUNDRED)


def settle_at_target_price(
    position: PositionState,
    target_price: Decimal,
) -> PnLResult:
    """Settle the whole position at a single target price.

    Args:
        position: Aggregated purchase side.
        target_price: Price every share is sold at.

    Returns:
        PnLResult: Exit value against the total cost.

    Raises:
        InvalidInputError: If the position has no cost basis.
    """
    exit_value = coerce_decimal(target_price) * position.total_shares
    return compute_profit_loss(exit_value, position.total_cost)


def settle_split_sells(
    position: PositionState,
    sell_lots: Iterable[Lot],
) -> tuple[PnLResult, Decimal]:
    """Settle a staged exit against the blended average cost.

    Only the sold portion carries cost basis (``average_cost * sold``);
    sell lots are not matched against individual purchase lots.

    Args:
        position: Aggregated purchase side.
        sell_lots: Sale lots.

    Returns:
        tuple[PnLResult, Decimal]: Settlement and number of shares sold.

    Raises:
        OverSellError: If more shares are sold than held.
        InvalidInputError: If the sold portion has no cost basis.
    """
    exit_value = _ZERO
    sold_shares = _ZERO
    for lot in sell_lots:
        exit_value += lot.amount
        sold_shares += lot.quantity
    if sold_shares > position.total_shares:
        raise OverSellError(sold_shares, position.total_shares)
    cost_basis = position.average_cost * sold_shares
    return compute_profit_loss(exit_value, cost_basis), sold_shares


def compute_profit_loss(exit_value: Decimal, cost_basis: Decimal) -> PnLResult:
    """Compute profit or loss of an exit against its cost basis.

    Args:
        exit_value: Proceeds of the exit.
        cost_basis: Cost attributed to the shares sold.

    Returns:
        PnLResult: Signed amount and rate in percent.

    Raises:
        InvalidInputError: If the cost basis is not positive.
    """
    exit_value = coerce_decimal(exit_value)
    cost_basis = coerce_decimal(cost_basis)
    if cost_basis <= 0:
        raise InvalidInputError(
            "Cost basis must be positive to compute a profit/loss rate",
            field="cost_basis",
        )
    amount = exit_value - cost_basis
    return PnLResult(
        exit_value=exit_value,
        cost_basis=cost_basis,
        profit_loss_amount=amount,
        profit_loss_rate_percent=amount / cost_basis * _HUNDRED,
    )


def _position(total_cost: Decimal, total_shares: Decimal) -> PositionState:
    average_cost = total_cost / total_shares if total_shares > 0 else _ZERO
    return PositionState(
        average_cost=average_cost,
        total_shares=total_shares,
        total_cost=total_cost,
    )


def _require_positive_cost(average_cost: Decimal) -> Decimal:
    average_cost = coerce_decimal(average_cost)
    if average_cost <= 0:
        raise InvalidInputError(
            "Average cost must be positive to derive a target",
            field="average_cost",
        )
    return average_cost


__all__ = [
    "aggregate_lots",
    "position_from_investment",
    "derive_target_rate",
    "derive_target_price",
    "settle_at_target_price",
    "settle_split_sells",
    "compute_profit_loss",
]
