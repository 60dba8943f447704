"""Domain services for calendar-year reports."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import EXPENSE, INCOME
from src.domain.models import (
    AffiliateProgram,
    AnnualReport,
    MonthlyBreakdown,
    Transaction,
)
from src.domain.services.finance import (
    compute_category_breakdown,
    compute_summary,
)
from src.domain.services.normalization import month_of


def filter_transactions_for_year(
    transactions: Iterable[Transaction],
    year: str,
) -> list[Transaction]:
    """Keep transactions whose ISO date starts with the given year."""
    return [
        transaction
        for transaction in transactions
        if transaction.date.startswith(year)
    ]


def compute_monthly_breakdown(
    transactions: Iterable[Transaction],
) -> list[MonthlyBreakdown]:
    """Return income and expense per month, oldest month first.

    Args:
        transactions: Transactions, usually restricted to one year.

    Returns:
        list[MonthlyBreakdown]: One entry per month with any transaction.
    """
    income: dict[str, Decimal] = {}
    expense: dict[str, Decimal] = {}
    for transaction in transactions:
        month = month_of(transaction.date)
        income.setdefault(month, Decimal("0"))
        expense.setdefault(month, Decimal("0"))
        if transaction.type == INCOME:
            income[month] += transaction.amount
        elif transaction.type == EXPENSE:
            expense[month] += transaction.amount
    return [
        MonthlyBreakdown(
            month=month,
            income=income[month],
            expense=expense[month],
        )
        for month in sorted(income)
    ]


def compute_annual_report(
    year: str,
    transactions: Iterable[Transaction],
    affiliate_programs: Iterable[AffiliateProgram] = (),
) -> AnnualReport:
    """Build the summary and breakdowns for one calendar year.

    Affiliate programs are undated, so their commissions are reported in
    full for any year.

    Args:
        year: Four-digit year, e.g. "2024".
        transactions: All transactions of a single account.
        affiliate_programs: Affiliate programs of the same account.

    Returns:
        AnnualReport: Year-scoped summary, category and month breakdowns.
    """
    yearly = filter_transactions_for_year(transactions, year)
    return AnnualReport(
        year=year,
        summary=compute_summary(yearly, affiliate_programs),
        income_by_category=compute_category_breakdown(yearly, INCOME),
        expenses_by_category=compute_category_breakdown(yearly, EXPENSE),
        months=compute_monthly_breakdown(yearly),
    )


__all__ = [
    "filter_transactions_for_year",
    "compute_monthly_breakdown",
    "compute_annual_report",
]
