"""Domain models package."""

from .growth import (
    AccrualComparison,
    AccrualModel,
    DividendBreakdown,
    DividendSettings,
    GrowthInput,
    GrowthResult,
    PeriodUnit,
)
from .position import Lot, PnLResult, PositionEvaluation, PositionState

__all__ = [
    "AccrualComparison",
    "AccrualModel",
    "DividendBreakdown",
    "DividendSettings",
    "GrowthInput",
    "GrowthResult",
    "PeriodUnit",
    "Lot",
    "PnLResult",
    "PositionEvaluation",
    "PositionState",
]
