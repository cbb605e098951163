"""Domain package for the calculation engines and their records."""

from .errors import CalculatorError, InvalidInputError, OverSellError
from .models import (
    AccrualComparison,
    DividendBreakdown,
    DividendSettings,
    GrowthInput,
    GrowthResult,
    Lot,
    PnLResult,
    PositionEvaluation,
    PositionState,
)
from .services import calculate_investment, compare_accrual_models

__all__ = [
    "CalculatorError",
    "InvalidInputError",
    "OverSellError",
    "AccrualComparison",
    "DividendBreakdown",
    "DividendSettings",
    "GrowthInput",
    "GrowthResult",
    "Lot",
    "PnLResult",
    "PositionEvaluation",
    "PositionState",
    "calculate_investment",
    "compare_accrual_models",
]
