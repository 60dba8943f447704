"""Domain services for transaction aggregates."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import EXPENSE, INCOME
from src.domain.models import (
    AffiliateProgram,
    FinancialSummary,
    MonthlyAmount,
    Transaction,
    TransactionTotals,
)
from src.domain.services.normalization import month_of


def compute_summary(
    transactions: Iterable[Transaction],
    affiliate_programs: Iterable[AffiliateProgram] = (),
) -> FinancialSummary:
    """Compute revenue, expense and affiliate totals.

    Args:
        transactions: Transactions of a single account.
        affiliate_programs: Affiliate programs of the same account.

    Returns:
        FinancialSummary: Totals before any currency conversion.
    """
    revenue = Decimal("0")
    expenses = Decimal("0")
    for transaction in transactions:
        if transaction.type == INCOME:
            revenue += transaction.amount
        elif transaction.type == EXPENSE:
            expenses += transaction.amount

    affiliate_earnings = sum(
        (program.commissions for program in affiliate_programs),
        Decimal("0"),
    )
    return FinancialSummary(
        revenue=revenue,
        expenses=expenses,
        affiliate_earnings=affiliate_earnings,
    )


def compute_income_by_month(
    transactions: Iterable[Transaction],
) -> dict[str, Decimal]:
    """Sum income amounts per YYYY-MM month.

    Args:
        transactions: Transactions of a single account.

    Returns:
        dict[str, Decimal]: Income per month; months without income are absent.
    """
    totals: dict[str, Decimal] = {}
    for transaction in transactions:
        if transaction.type != INCOME:
            continue
        month = month_of(transaction.date)
        totals[month] = totals.get(month, Decimal("0")) + transaction.amount
    return totals


def compute_monthly_revenue_trend(
    transactions: Iterable[Transaction],
) -> list[MonthlyAmount]:
    """Return monthly income totals sorted from oldest to newest month."""
    totals = compute_income_by_month(transactions)
    return [
        MonthlyAmount(month=month, amount=amount)
        for month, amount in sorted(totals.items())
    ]


def compute_category_breakdown(
    transactions: Iterable[Transaction],
    transaction_type: str,
) -> dict[str, Decimal]:
    """Sum amounts per category for one transaction type.

    Categories keep the order they were first seen in; callers should not
    rely on it.

    Args:
        transactions: Transactions of a single account.
        transaction_type: "income" or "expense".

    Returns:
        dict[str, Decimal]: Total amount per category.
    """
    totals: dict[str, Decimal] = {}
    for transaction in transactions:
        if transaction.type != transaction_type:
            continue
        totals[transaction.category] = (
            totals.get(transaction.category, Decimal("0"))
            + transaction.amount
        )
    return totals


def compute_monthly_totals(
    transactions: Iterable[Transaction],
) -> list[MonthlyAmount]:
    """Return per-month totals of any transactions, newest month first."""
    totals: dict[str, Decimal] = {}
    for transaction in transactions:
        month = month_of(transaction.date)
        totals[month] = totals.get(month, Decimal("0")) + transaction.amount
    return [
        MonthlyAmount(month=month, amount=amount)
        for month, amount in sorted(totals.items(), reverse=True)
    ]


def filter_transactions(
    transactions: Iterable[Transaction],
    *,
    transaction_type: str | None = None,
    search: str | None = None,
    category: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> list[Transaction]:
    """Filter transactions the way the revenue and expense tables do.

    Args:
        transactions: Transactions of a single account.
        transaction_type: Optional "income" or "expense" restriction.
        search: Case-insensitive text matched in description or category.
        category: Exact category match.
        start_date: Inclusive lower ISO date bound.
        end_date: Inclusive upper ISO date bound.

    Returns:
        list[Transaction]: Matching transactions in their original order.
    """
    needle = (search or "").strip().lower()
    filtered = []
    for transaction in transactions:
        if transaction_type and transaction.type != transaction_type:
            continue
        if needle and not (
            needle in transaction.description.lower()
            or needle in transaction.category.lower()
        ):
            continue
        if category and transaction.category != category:
            continue
        if start_date and transaction.date < start_date:
            continue
        if end_date and transaction.date > end_date:
            continue
        filtered.append(transaction)
    return filtered


def compute_transaction_totals(
    transactions: Iterable[Transaction],
) -> TransactionTotals:
    """Return count, total and tax-deductible total of transactions."""
    count = 0
    total = Decimal("0")
    tax_deductible = Decimal("0")
    for transaction in transactions:
        count += 1
        total += transaction.amount
        if transaction.is_tax_deductible:
            tax_deductible += transaction.amount
    return TransactionTotals(
        count=count,
        total=total,
        tax_deductible=tax_deductible,
    )


__all__ = [
    "compute_summary",
    "compute_income_by_month",
    "compute_monthly_revenue_trend",
    "compute_category_breakdown",
    "compute_monthly_totals",
    "filter_transactions",
    "compute_transaction_totals",
]
