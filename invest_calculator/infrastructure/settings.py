"""Settings helpers for the calculator adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os

from invest_calculator.domain.constants import ACCRUAL_MODELS, SIMPLE
from invest_calculator.infrastructure.logging.logger import get_app_logger

DEFAULT_CURRENCY = "KRW"
DEFAULT_DIVIDEND_TAX_RATE = Decimal("15.4")


@dataclass(frozen=True)
class CalculatorSettings:
    """Display and default-input settings.

    Attributes:
        currency_code: Currency used when formatting amounts.
        dividend_tax_rate: Default flat dividend tax rate in percent.
        accrual_model: Default accrual model preselected in forms.
    """

    currency_code: str = DEFAULT_CURRENCY
    dividend_tax_rate: Decimal = DEFAULT_DIVIDEND_TAX_RATE
    accrual_model: str = SIMPLE

    @classmethod
    def from_env(cls) -> "CalculatorSettings":
        """Build settings from environment variables.

        Returns:
            CalculatorSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        currency = (
            os.getenv("INVEST_CALC_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        tax_rate = cls._parse_tax_rate(
            os.getenv("INVEST_CALC_DIVIDEND_TAX_RATE"),
            logger=logger,
        )
        model = os.getenv("INVEST_CALC_ACCRUAL_MODEL", SIMPLE).strip().lower()
        if model not in ACCRUAL_MODELS:
            logger.warning(
                f"Unknown INVEST_CALC_ACCRUAL_MODEL '{model}', using {SIMPLE}"
            )
            model = SIMPLE
        return cls(
            currency_code=currency,
            dividend_tax_rate=tax_rate,
            accrual_model=model,
        )

    @staticmethod
    def _parse_tax_rate(raw_value: str | None, logger) -> Decimal:
        """Parse the default dividend tax rate.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            Decimal: Tax rate in percent, the default when invalid.
        """
        if raw_value is None or not raw_value.strip():
            return DEFAULT_DIVIDEND_TAX_RATE
        try:
            value = Decimal(raw_value.strip())
        except InvalidOperation:
            logger.warning(
                f"Invalid INVEST_CALC_DIVIDEND_TAX_RATE '{raw_value}', "
                f"using {DEFAULT_DIVIDEND_TAX_RATE}"
            )
            return DEFAULT_DIVIDEND_TAX_RATE
        if not value.is_finite():
            logger.warning(
                f"Invalid INVEST_CALC_DIVIDEND_TAX_RATE '{raw_value}', "
                f"using {DEFAULT_DIVIDEND_TAX_RATE}"
            )
            return DEFAULT_DIVIDEND_TAX_RATE
        if not Decimal("0") <= value <= Decimal("100"):
            logger.warning(
                f"INVEST_CALC_DIVIDEND_TAX_RATE out of range: {value}, "
                f"using {DEFAULT_DIVIDEND_TAX_RATE}"
            )
            return DEFAULT_DIVIDEND_TAX_RATE
        return value


__all__ = ["CalculatorSettings", "DEFAULT_CURRENCY", "DEFAULT_DIVIDEND_TAX_RATE"]
