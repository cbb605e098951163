"""Two-way binding between the target price and target rate fields.

Whichever field the user edited last is the source; the other one is
derived from the current average cost. The UI keeps a ``TargetSync`` in
``st.session_state`` and calls ``edit_price``/``edit_rate`` from the
widget callbacks, then ``refresh`` whenever the purchase side changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from invest_calculator.domain.services.position import (
    derive_target_price,
    derive_target_rate,
)
from invest_calculator.utils.decimal_utils import round_half_up, round_rate


@dataclass
class TargetSync:
    """Target price/rate pair with last-writer-wins synchronization.

    Attributes:
        target_price: Displayed target price, whole units.
        target_rate: Displayed target rate in percent, two decimals.
        last_edited: Field the user edited last.
    """

    target_price: Decimal | None = None
    target_rate: Decimal | None = None
    last_edited: Literal["price", "rate"] | None = None

    def edit_price(self, average_cost: Decimal, price: Decimal) -> None:
        """Record a price edit and derive the rate when possible."""
        self.target_price = price
        self.last_edited = "price"
        if average_cost > 0:
            self.target_rate = round_rate(
                derive_target_rate(average_cost, price)
            )

    def edit_rate(self, average_cost: Decimal, rate: Decimal) -> None:
        """Record a rate edit and derive the price when possible."""
        self.target_rate = rate
        self.last_edited = "rate"
        if average_cost > 0:
            self.target_price = round_half_up(
                derive_target_price(average_cost, rate)
            )

    def refresh(self, average_cost: Decimal) -> None:
        """Re-derive the dependent field after the average cost changed."""
        if self.last_edited == "price" and self.target_price is not None:
            self.edit_price(average_cost, self.target_price)
        elif self.last_edited == "rate" and self.target_rate is not None:
            self.edit_rate(average_cost, self.target_rate)

    def reset(self) -> None:
        self.target_price = None
        self.target_rate = None
        self.last_edited = None


__all__ = ["TargetSync"]
