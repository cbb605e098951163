"""Domain errors raised by validation and the position engine."""

from decimal import Decimal


class CalculatorError(ValueError):
    """Base class for calculation request failures."""


class InvalidInputError(CalculatorError):
    """Raised when a required value is missing or outside its domain."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class OverSellError(CalculatorError):
    """Raised when split sells exceed the quantity held.

    Attributes:
        sold_shares: Total quantity across the sell lots.
        held_shares: Quantity held in the position.
    """

    def __init__(self, sold_shares: Decimal, held_shares: Decimal) -> None:
        super().__init__(
            f"Cannot sell {sold_shares} shares, only {held_shares} held"
        )
        self.sold_shares = sold_shares
        self.held_shares = held_shares


__all__ = ["CalculatorError", "InvalidInputError", "OverSellError"]
