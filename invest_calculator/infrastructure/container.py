"""Composition root for wiring use cases to infrastructure."""

from invest_calculator.application.use_cases.calculate_investment import (
    CalculateInvestmentUseCase,
)
from invest_calculator.application.use_cases.compare_accrual_models import (
    CompareAccrualModelsUseCase,
)
from invest_calculator.application.use_cases.evaluate_position import (
    EvaluatePositionUseCase,
)
from invest_calculator.infrastructure.logging.logger import get_app_logger
from invest_calculator.infrastructure.settings import CalculatorSettings


def build_settings() -> CalculatorSettings:
    """Return settings sourced from the environment."""
    return CalculatorSettings.from_env()


def build_calculate_investment_use_case() -> CalculateInvestmentUseCase:
    """Return the growth projection use case."""
    return CalculateInvestmentUseCase(logger=get_app_logger())


def build_compare_accrual_models_use_case() -> CompareAccrualModelsUseCase:
    """Return the accrual model comparison use case."""
    return CompareAccrualModelsUseCase(logger=get_app_logger())


def build_evaluate_position_use_case() -> EvaluatePositionUseCase:
    """Return the position settlement use case."""
    return EvaluatePositionUseCase(logger=get_app_logger())


__all__ = [
    "build_settings",
    "build_calculate_investment_use_case",
    "build_compare_accrual_models_use_case",
    "build_evaluate_position_use_case",
]
