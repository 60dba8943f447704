"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from src.domain.models.records import AffiliateProgram, DigitalProduct, Goal


@dataclass(frozen=True)
class FinancialSummary:
    """Headline totals for a set of transactions.

    Attributes:
        revenue: Sum of income amounts.
        expenses: Sum of expense amounts.
        affiliate_earnings: Sum of affiliate commissions.
    """

    revenue: Decimal
    expenses: Decimal
    affiliate_earnings: Decimal

    @property
    def net_profit(self) -> Decimal:
        """Return revenue minus expenses."""
        return self.revenue - self.expenses


@dataclass(frozen=True)
class MonthlyAmount:
    """Amount aggregated for a YYYY-MM month."""

    month: str
    amount: Decimal


@dataclass(frozen=True)
class AffiliateProgramStats:
    """Per-program affiliate figures."""

    program: AffiliateProgram
    conversion_rate: Decimal
    epc: Decimal


@dataclass(frozen=True)
class AffiliateRollup:
    """Totals across all affiliate programs of an account."""

    total_clicks: int
    total_conversions: int
    total_commissions: Decimal
    avg_conversion_rate: Decimal
    epc: Decimal
    programs: list[AffiliateProgramStats] = field(default_factory=list)
    top_program: AffiliateProgram | None = None


@dataclass(frozen=True)
class RankedProduct:
    """Digital product with its 1-based sales rank."""

    rank: int
    product: DigitalProduct

    @property
    def net_revenue(self) -> Decimal:
        return self.product.net_revenue


@dataclass(frozen=True)
class ProductRollup:
    """Totals across all digital products of an account."""

    total_sales: int
    total_gross: Decimal
    total_fees: Decimal
    ranking: list[RankedProduct] = field(default_factory=list)

    @property
    def total_net(self) -> Decimal:
        """Return gross revenue minus platform fees."""
        return self.total_gross - self.total_fees

    @property
    def top_product(self) -> DigitalProduct | None:
        """Return the best-selling product, if any."""
        return self.ranking[0].product if self.ranking else None


@dataclass(frozen=True)
class GoalProgress:
    """Live progress of a goal computed from transactions."""

    goal: Goal
    current_amount: Decimal
    progress: Decimal

    @property
    def completed(self) -> bool:
        return self.progress >= 100


@dataclass(frozen=True)
class IncomeForecast:
    """Next-month income extrapolated from the last three months.

    Attributes:
        month: YYYY-MM month being forecast.
        amount: Forecast income, never negative.
        trend: Average month-over-month change across the window.
        growth_percent: Trend relative to the latest month.
        history: Recent monthly income used for display.
    """

    month: str
    amount: Decimal
    trend: Decimal
    growth_percent: Decimal
    history: list[MonthlyAmount] = field(default_factory=list)


@dataclass(frozen=True)
class InsufficientData:
    """Marker returned when there is not enough income history."""

    months_available: int
    months_required: int


ForecastResult = Union[IncomeForecast, InsufficientData]


@dataclass(frozen=True)
class MonthlyBreakdown:
    """Income and expense totals for one month."""

    month: str
    income: Decimal
    expense: Decimal

    @property
    def profit(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class AnnualReport:
    """Summary and breakdowns restricted to a calendar year."""

    year: str
    summary: FinancialSummary
    income_by_category: dict[str, Decimal]
    expenses_by_category: dict[str, Decimal]
    months: list[MonthlyBreakdown]


@dataclass(frozen=True)
class TransactionTotals:
    """Totals shown above a filtered transaction table."""

    count: int
    total: Decimal
    tax_deductible: Decimal


@dataclass(frozen=True)
class DashboardView:
    """Every derived figure displayed for an account."""

    account_id: int
    summary: FinancialSummary
    revenue_trend: list[MonthlyAmount]
    income_by_category: dict[str, Decimal]
    expenses_by_category: dict[str, Decimal]
    affiliate: AffiliateRollup
    products: ProductRollup
    goals: list[GoalProgress]
    forecast: ForecastResult


__all__ = [
    "FinancialSummary",
    "MonthlyAmount",
    "AffiliateProgramStats",
    "AffiliateRollup",
    "RankedProduct",
    "ProductRollup",
    "GoalProgress",
    "IncomeForecast",
    "InsufficientData",
    "ForecastResult",
    "MonthlyBreakdown",
    "AnnualReport",
    "TransactionTotals",
    "DashboardView",
]
