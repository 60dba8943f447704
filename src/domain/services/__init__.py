"""Domain services package."""

from .affiliate import (
    compute_affiliate_rollup,
    conversion_rate,
    earnings_per_click,
)
from .dashboard import compute_dashboard
from .finance import (
    compute_category_breakdown,
    compute_income_by_month,
    compute_monthly_revenue_trend,
    compute_monthly_totals,
    compute_summary,
    compute_transaction_totals,
    filter_transactions,
)
from .forecast import compute_income_forecast, forecast_from_transactions
from .goals import (
    compute_goal_current_amount,
    compute_goal_progress,
    compute_goals_progress,
)
from .normalization import (
    month_of,
    next_month,
    normalize_category,
    normalize_record_type,
)
from .products import compute_product_rollup, rank_products
from .reports import (
    compute_annual_report,
    compute_monthly_breakdown,
    filter_transactions_for_year,
)
from .snapshot import build_account_snapshot
from .validation import (
    validate_affiliate_programs,
    validate_digital_products,
    validate_transactions,
)

__all__ = [
    "build_account_snapshot",
    "compute_affiliate_rollup",
    "compute_annual_report",
    "compute_category_breakdown",
    "compute_dashboard",
    "compute_goal_current_amount",
    "compute_goal_progress",
    "compute_goals_progress",
    "compute_income_by_month",
    "compute_income_forecast",
    "compute_monthly_breakdown",
    "compute_monthly_revenue_trend",
    "compute_monthly_totals",
    "compute_product_rollup",
    "compute_summary",
    "compute_transaction_totals",
    "conversion_rate",
    "earnings_per_click",
    "filter_transactions",
    "filter_transactions_for_year",
    "forecast_from_transactions",
    "month_of",
    "next_month",
    "normalize_category",
    "normalize_record_type",
    "rank_products",
    "validate_affiliate_programs",
    "validate_digital_products",
    "validate_transactions",
]
