"""Domain services package."""

from .growth import (
    calculate_investment,
    compare_accrual_models,
    compute_compound_interest,
    compute_dividend_reinvestment,
    compute_simple_interest,
    convert_period_to_days,
)
from .normalization import (
    normalize_accrual_model,
    normalize_period_unit,
    parse_amount_text,
    parse_quantity_text,
)
from .position import (
    aggregate_lots,
    compute_profit_loss,
    derive_target_price,
    derive_target_rate,
    position_from_investment,
    settle_at_target_price,
    settle_split_sells,
)
from .validation import validate_growth_input, validate_lots, validate_target_price

__all__ = [
    "calculate_investment",
    "compare_accrual_models",
    "compute_compound_interest",
    "compute_dividend_reinvestment",
    "compute_simple_interest",
    "convert_period_to_days",
    "normalize_accrual_model",
    "normalize_period_unit",
    "parse_amount_text",
    "parse_quantity_text",
    "aggregate_lots",
    "compute_profit_loss",
    "derive_target_price",
    "derive_target_rate",
    "position_from_investment",
    "settle_at_target_price",
    "settle_split_sells",
    "validate_growth_input",
    "validate_lots",
    "validate_target_price",
]
