"""Use case to compare simple and compound projections of one request."""

from invest_calculator.application.use_cases.calculate_investment import (
    GrowthRequest,
    build_growth_input,
)
from invest_calculator.domain.models import AccrualComparison
from invest_calculator.domain.services.growth import compare_accrual_models
from invest_calculator.infrastructure.logging.logger import get_app_logger


class CompareAccrualModelsUseCase:
    """Compute a request under both accrual models."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(self, request: GrowthRequest) -> AccrualComparison:
        """Return both projections and which one ends higher.

        Args:
            request: Raw growth request; its accrual model is ignored.

        Returns:
            AccrualComparison: Simple and compound results.
        """
        comparison = compare_accrual_models(
            build_growth_input(request),
            logger=self._logger,
        )
        self._logger.info(
            f"Accrual comparison: simple={comparison.simple_final_amount}, "
            f"compound={comparison.compound_final_amount}, "
            f"better={comparison.better_model or 'equal'}"
        )
        return comparison


__all__ = ["CompareAccrualModelsUseCase", "AccrualComparison"]
