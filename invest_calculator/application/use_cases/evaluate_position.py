"""Use case to settle a stock position against a target or staged exit."""

from collections.abc import Sequence
from decimal import Decimal

from invest_calculator.domain.errors import InvalidInputError
from invest_calculator.domain.models import (
    Lot,
    PositionEvaluation,
    PositionState,
)
from invest_calculator.domain.services.position import (
    aggregate_lots,
    position_from_investment,
    settle_at_target_price,
    settle_split_sells,
)
from invest_calculator.domain.services.validation import (
    validate_lots,
    validate_target_price,
)
from invest_calculator.infrastructure.logging.logger import get_app_logger
from invest_calculator.utils.decimal_utils import coerce_decimal


class EvaluatePositionUseCase:
    """Compute average cost and profit/loss of a position."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(
        self,
        buy_lots: Sequence[Lot] | None = None,
        investment_amount: Decimal | None = None,
        purchase_price: Decimal | None = None,
        target_price: Decimal | None = None,
        sell_lots: Sequence[Lot] | None = None,
    ) -> PositionEvaluation:
        """Return the position and its settlement.

        The purchase side comes from ``buy_lots`` when given, otherwise from
        ``investment_amount`` at ``purchase_price``. Sell lots switch to the
        staged-exit mode; without them the whole position is sold at
        ``target_price``.

        Args:
            buy_lots: Optional purchase lots.
            investment_amount: Amount invested in single-purchase mode.
            purchase_price: Price paid in single-purchase mode.
            target_price: Exit price in target-price mode.
            sell_lots: Optional sale lots.

        Returns:
            PositionEvaluation: Position state, settlement and sold shares.

        Raises:
            InvalidInputError: If the purchase or exit inputs are invalid.
            OverSellError: If the sell lots exceed the shares held.
        """
        position = self.build_position(
            buy_lots=buy_lots,
            investment_amount=investment_amount,
            purchase_price=purchase_price,
        )
        if sell_lots:
            validate_lots(sell_lots, kind="sell")
            pnl, sold_shares = settle_split_sells(position, sell_lots)
            mode = "split-sell"
        else:
            price = validate_target_price(
                None if target_price is None else coerce_decimal(target_price)
            )
            pnl = settle_at_target_price(position, price)
            sold_shares = position.total_shares
            mode = "target-price"

        self._logger.info(
            f"Position settled ({mode}): shares={position.total_shares}, "
            f"average_cost={position.average_cost}, sold={sold_shares}, "
            f"profit_loss={pnl.profit_loss_amount}"
        )
        return PositionEvaluation(
            position=position,
            pnl=pnl,
            sold_shares=sold_shares,
        )

    @staticmethod
    def build_position(
        buy_lots: Sequence[Lot] | None = None,
        investment_amount: Decimal | None = None,
        purchase_price: Decimal | None = None,
    ) -> PositionState:
        """Aggregate the purchase side of a request.

        Raises:
            InvalidInputError: If no shares can be derived.
        """
        if buy_lots:
            validate_lots(buy_lots, kind="buy")
            position = aggregate_lots(buy_lots)
        else:
            position = position_from_investment(
                coerce_decimal(investment_amount),
                coerce_decimal(purchase_price),
            )
        if position.is_empty:
            raise InvalidInputError(
                "Enter the purchase details before settling",
                field="buy",
            )
        return position


__all__ = ["EvaluatePositionUseCase", "PositionEvaluation"]
