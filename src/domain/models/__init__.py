"""Domain models package."""

from .finance import (
    AffiliateProgramStats,
    AffiliateRollup,
    AnnualReport,
    DashboardView,
    FinancialSummary,
    ForecastResult,
    GoalProgress,
    IncomeForecast,
    InsufficientData,
    MonthlyAmount,
    MonthlyBreakdown,
    ProductRollup,
    RankedProduct,
    TransactionTotals,
)
from .records import (
    AccountSnapshot,
    AffiliateProgram,
    DigitalProduct,
    Goal,
    Transaction,
)

__all__ = [
    "AccountSnapshot",
    "AffiliateProgram",
    "DigitalProduct",
    "Goal",
    "Transaction",
    "AffiliateProgramStats",
    "AffiliateRollup",
    "AnnualReport",
    "DashboardView",
    "FinancialSummary",
    "ForecastResult",
    "GoalProgress",
    "IncomeForecast",
    "InsufficientData",
    "MonthlyAmount",
    "MonthlyBreakdown",
    "ProductRollup",
    "RankedProduct",
    "TransactionTotals",
]
