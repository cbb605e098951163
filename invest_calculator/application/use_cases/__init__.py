"""Application use cases package."""

from .calculate_investment import (
    CalculateInvestmentUseCase,
    GrowthRequest,
    GrowthResult,
    build_growth_input,
)
from .compare_accrual_models import (
    AccrualComparison,
    CompareAccrualModelsUseCase,
)
from .evaluate_position import EvaluatePositionUseCase, PositionEvaluation

__all__ = [
    "CalculateInvestmentUseCase",
    "GrowthRequest",
    "GrowthResult",
    "build_growth_input",
    "AccrualComparison",
    "CompareAccrualModelsUseCase",
    "EvaluatePositionUseCase",
    "PositionEvaluation",
]
