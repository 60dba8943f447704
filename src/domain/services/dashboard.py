"""Compose every dashboard figure from an account snapshot."""

from src.domain.constants import EXPENSE, INCOME
from src.domain.models import AccountSnapshot, DashboardView
from src.domain.services.affiliate import compute_affiliate_rollup
from src.domain.services.finance import (
    compute_category_breakdown,
    compute_income_by_month,
    compute_monthly_revenue_trend,
    compute_summary,
)
from src.domain.services.forecast import compute_income_forecast
from src.domain.services.goals import compute_goals_progress
from src.domain.services.products import compute_product_rollup


def compute_dashboard(snapshot: AccountSnapshot) -> DashboardView:
    """Compute the dashboard view for a consistent account snapshot.

    Args:
        snapshot: Records of a single account.

    Returns:
        DashboardView: Summary, trend, breakdowns, rollups, goals and the
        income forecast.
    """
    transactions = snapshot.transactions
    income_by_month = compute_income_by_month(transactions)
    return DashboardView(
        account_id=snapshot.account_id,
        summary=compute_summary(transactions, snapshot.affiliate_programs),
        revenue_trend=compute_monthly_revenue_trend(transactions),
        income_by_category=compute_category_breakdown(transactions, INCOME),
        expenses_by_category=compute_category_breakdown(
            transactions, EXPENSE
        ),
        affiliate=compute_affiliate_rollup(snapshot.affiliate_programs),
        products=compute_product_rollup(snapshot.digital_products),
        goals=compute_goals_progress(snapshot.goals, transactions),
        forecast=compute_income_forecast(income_by_month),
    )


__all__ = ["compute_dashboard"]
