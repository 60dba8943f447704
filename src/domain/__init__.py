"""Domain package for business rules and core models."""

from .constants import (
    EXPENSE,
    GOAL_TYPES,
    INCOME,
    MIN_FORECAST_MONTHS,
    PROFIT,
    TRANSACTION_TYPES,
)
from .models import (
    AccountSnapshot,
    AffiliateProgram,
    AnnualReport,
    DashboardView,
    DigitalProduct,
    FinancialSummary,
    ForecastResult,
    Goal,
    GoalProgress,
    IncomeForecast,
    InsufficientData,
    Transaction,
)
from .services import (
    build_account_snapshot,
    compute_annual_report,
    compute_dashboard,
    compute_income_forecast,
    compute_summary,
)

__all__ = [
    "EXPENSE",
    "GOAL_TYPES",
    "INCOME",
    "MIN_FORECAST_MONTHS",
    "PROFIT",
    "TRANSACTION_TYPES",
    "AccountSnapshot",
    "AffiliateProgram",
    "AnnualReport",
    "DashboardView",
    "DigitalProduct",
    "FinancialSummary",
    "ForecastResult",
    "Goal",
    "GoalProgress",
    "IncomeForecast",
    "InsufficientData",
    "Transaction",
    "build_account_snapshot",
    "compute_annual_report",
    "compute_dashboard",
    "compute_income_forecast",
    "compute_summary",
]
