"""Domain models for stock position profit and loss."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Lot:
    """Single purchase or sale at a price for a quantity of shares."""

    price: Decimal
    quantity: int

    @property
    def amount(self) -> Decimal:
        """Return price times quantity."""
        return self.price * self.quantity


@dataclass(frozen=True)
class PositionState:
    """Aggregated purchase side of a position.

    Attributes:
        average_cost: Cost per share, 0 when no shares are held.
        total_shares: Number of shares held (fractional in amount mode).
        total_cost: Total amount paid.
    """

    average_cost: Decimal
    total_shares: Decimal
    total_cost: Decimal

    @property
    def is_empty(self) -> bool:
        return self.total_shares <= 0


@dataclass(frozen=True)
class PnLResult:
    """Settlement of a position against an exit."""

    exit_value: Decimal
    cost_basis: Decimal
    profit_loss_amount: Decimal
    profit_loss_rate_percent: Decimal

    @property
    def is_profit(self) -> bool:
        return self.profit_loss_amount > 0

    @property
    def is_loss(self) -> bool:
        return self.profit_loss_amount < 0


@dataclass(frozen=True)
class PositionEvaluation:
    """Position state together with its settlement."""

    position: PositionState
    pnl: PnLResult
    sold_shares: Decimal


__all__ = ["Lot", "PositionState", "PnLResult", "PositionEvaluation"]
