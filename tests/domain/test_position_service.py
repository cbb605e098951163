"""Tests for the position profit/loss domain services."""

from decimal import Decimal

import pytest

from invest_calculator.domain.errors import InvalidInputError, OverSellError
from invest_calculator.domain.models import Lot, PositionState
from invest_calculator.domain.services.position import (
    aggregate_lots,
    compute_profit_loss,
    derive_target_price,
    derive_target_rate,
    position_from_investment,
    settle_at_target_price,
    settle_split_sells,
)


def _lot(price: str, quantity: int) -> Lot:
    return Lot(price=Decimal(price), quantity=quantity)


def test_aggregate_lots_blends_average_cost() -> None:
    """Average cost is total cost over total shares."""
    position = aggregate_lots([_lot("100", 10), _lot("80", 10)])

    assert position.total_cost == Decimal("1800")
    assert position.total_shares == 20
    assert position.average_cost == Decimal("90")
    assert not position.is_empty


def test_aggregate_lots_without_shares_is_empty() -> None:
    """No shares yields a zero average instead of dividing by zero."""
    assert aggregate_lots([]).average_cost == 0
    position = aggregate_lots([_lot("100", 0)])

    assert position.average_cost == 0
    assert position.is_empty


def test_position_from_investment_derives_fractional_shares() -> None:
    """Amount mode buys ``amount / price`` shares."""
    position = position_from_investment(Decimal("1000000"), Decimal("30000"))

    assert position.total_cost == Decimal("1000000")
    assert position.total_shares.quantize(Decimal("0.0001")) == Decimal("33.3333")
    assert position.average_cost.quantize(Decimal("0.01")) == Decimal("30000.00")


def test_position_from_investment_with_zero_price_is_empty() -> None:
    """A zero price cannot buy shares."""
    assert position_from_investment(Decimal("1000"), Decimal("0")).is_empty


def test_target_rate_and_price_are_inverse() -> None:
    """Deriving one from the other returns the starting value."""
    assert derive_target_rate(Decimal("100"), Decimal("120")) == Decimal("20")
    assert derive_target_price(Decimal("100"), Decimal("20")) == Decimal("120")
    assert derive_target_rate(
        Decimal("90"), derive_target_price(Decimal("90"), Decimal("-12.5"))
    ) == Decimal("-12.5")


@pytest.mark.parametrize("derive", [derive_target_rate, derive_target_price])
def test_target_derivation_requires_positive_average_cost(derive) -> None:
    """Without a cost basis there is nothing to derive from."""
    with pytest.raises(InvalidInputError) as excinfo:
        derive(Decimal("0"), Decimal("10"))

    assert excinfo.value.field == "average_cost"


def test_settle_at_target_price_reports_profit() -> None:
    """10 shares at 10,000 sold at 12,000 gain 20,000 or 20%."""
    position = aggregate_lots([_lot("10000", 10)])

    pnl = settle_at_target_price(position, Decimal("12000"))

    assert pnl.exit_value == Decimal("120000")
    assert pnl.cost_basis == Decimal("100000")
    assert pnl.profit_loss_amount == Decimal("20000")
    assert pnl.profit_loss_rate_percent == Decimal("20")
    assert pnl.is_profit
    assert not pnl.is_loss


def test_settle_at_target_price_reports_loss() -> None:
    """Selling under the average cost yields a negative rate."""
    position = aggregate_lots([_lot("10000", 10)])

    pnl = settle_at_target_price(position, Decimal("8000"))

    assert pnl.profit_loss_amount == Decimal("-20000")
    assert pnl.profit_loss_rate_percent == Decimal("-20")
    assert pnl.is_loss


def test_settle_at_target_price_break_even() -> None:
    """Selling at the average cost is neither profit nor loss."""
    position = aggregate_lots([_lot("100", 3)])

    pnl = settle_at_target_price(position, Decimal("100"))

    assert pnl.profit_loss_amount == 0
    assert not pnl.is_profit
    assert not pnl.is_loss


def test_settle_split_sells_uses_blended_cost_of_sold_shares() -> None:
    """Only the sold portion carries cost basis."""
    position = aggregate_lots([_lot("100", 10), _lot("80", 10)])

    pnl, sold = settle_split_sells(position, [_lot("120", 5), _lot("110", 5)])

    assert sold == 10
    assert pnl.exit_value == Decimal("1150")
    assert pnl.cost_basis == Decimal("900")
    assert pnl.profit_loss_amount == Decimal("250")
    assert pnl.profit_loss_rate_percent.quantize(Decimal("0.01")) == Decimal(
        "27.78"
    )


def test_settle_split_sells_may_sell_everything() -> None:
    """Selling exactly the held quantity is allowed."""
    position = aggregate_lots([_lot("100", 10)])

    pnl, sold = settle_split_sells(position, [_lot("90", 10)])

    assert sold == position.total_shares
    assert pnl.profit_loss_amount == Decimal("-100")


def test_settle_split_sells_rejects_over_sell() -> None:
    """Selling more than held raises with both quantities."""
    position = aggregate_lots([_lot("100", 10)])

    with pytest.raises(OverSellError) as excinfo:
        settle_split_sells(position, [_lot("120", 10), _lot("130", 5)])

    assert excinfo.value.sold_shares == 15
    assert excinfo.value.held_shares == 10
    assert "Cannot sell 15 shares" in str(excinfo.value)


def test_settle_split_sells_without_sold_shares_has_no_basis() -> None:
    """Zero-quantity sells leave no cost basis to compare against."""
    position = aggregate_lots([_lot("100", 10)])

    with pytest.raises(InvalidInputError):
        settle_split_sells(position, [_lot("120", 0)])


def test_compute_profit_loss_requires_positive_basis() -> None:
    """A zero cost basis has no defined rate."""
    with pytest.raises(InvalidInputError) as excinfo:
        compute_profit_loss(Decimal("100"), Decimal("0"))

    assert excinfo.value.field == "cost_basis"


def test_settle_empty_position_raises() -> None:
    """An empty position cannot be settled at a target."""
    empty = PositionState(
        average_cost=Decimal("0"),
        total_shares=Decimal("0"),
        total_cost=Decimal("0"),
    )

    with pytest.raises(InvalidInputError):
        settle_at_target_price(empty, Decimal("100"))
