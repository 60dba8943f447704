"""Domain constants for creator finance analytics."""

INCOME = "income"
EXPENSE = "expense"
PROFIT = "profit"

TRANSACTION_TYPES = (INCOME, EXPENSE)
GOAL_TYPES = (INCOME, PROFIT)

MIN_FORECAST_MONTHS = 3
FORECAST_HISTORY_MONTHS = 6


__all__ = [
    "INCOME",
    "EXPENSE",
    "PROFIT",
    "TRANSACTION_TYPES",
    "GOAL_TYPES",
    "MIN_FORECAST_MONTHS",
    "FORECAST_HISTORY_MONTHS",
]
