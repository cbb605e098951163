"""Domain constants for the growth and position engines."""

SIMPLE = "simple"
COMPOUND = "compound"
ACCRUAL_MODELS = (SIMPLE, COMPOUND)

YEAR = "year"
MONTH = "month"
DAY = "day"
PERIOD_UNITS = (YEAR, MONTH, DAY)

DAYS_PER_YEAR = 365
DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12

DAYS_PER_UNIT = {
    YEAR: DAYS_PER_YEAR,
    MONTH: DAYS_PER_MONTH,
    DAY: 1,
}

MAX_DURATION_DAYS = DAYS_PER_YEAR * 100
MAX_RATE_PERCENT = 1000


__all__ = [
    "SIMPLE",
    "COMPOUND",
    "ACCRUAL_MODELS",
    "YEAR",
    "MONTH",
    "DAY",
    "PERIOD_UNITS",
    "DAYS_PER_YEAR",
    "DAYS_PER_MONTH",
    "MONTHS_PER_YEAR",
    "DAYS_PER_UNIT",
    "MAX_DURATION_DAYS",
    "MAX_RATE_PERCENT",
]
