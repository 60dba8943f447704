"""Domain services for monthly goal tracking."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from src.domain.constants import EXPENSE, INCOME, PROFIT
from src.domain.models import Goal, GoalProgress, Transaction
from src.utils.decimal_utils import HUNDRED, ZERO


def _sum_for_month(
    transactions: Iterable[Transaction],
    transaction_type: str,
    month: str,
) -> Decimal:
    return sum(
        (
            transaction.amount
            for transaction in transactions
            if transaction.type == transaction_type
            and transaction.date.startswith(month)
        ),
        ZERO,
    )


def compute_goal_current_amount(
    goal: Goal,
    transactions: Sequence[Transaction],
) -> Decimal:
    """Recompute the amount achieved towards a goal from transactions.

    The goal's stored current_amount is ignored.

    Args:
        goal: Goal to evaluate.
        transactions: Transactions of the goal's account.

    Returns:
        Decimal: Income in the goal month, or income minus expenses for
        profit goals. Unknown goal types yield 0.
    """
    if goal.type == INCOME:
        return _sum_for_month(transactions, INCOME, goal.month)
    if goal.type == PROFIT:
        income = _sum_for_month(transactions, INCOME, goal.month)
        expenses = _sum_for_month(transactions, EXPENSE, goal.month)
        return income - expenses
    return ZERO


def compute_goal_progress(
    goal: Goal,
    transactions: Sequence[Transaction],
) -> GoalProgress:
    """Return the live progress of a goal, capped at 100 percent.

    A target of zero or less is replaced by 1 in the denominator.
    """
    current_amount = compute_goal_current_amount(goal, transactions)
    target = goal.target_amount if goal.target_amount > 0 else Decimal("1")
    progress = min(HUNDRED, current_amount / target * HUNDRED)
    return GoalProgress(
        goal=goal,
        current_amount=current_amount,
        progress=progress,
    )


def compute_goals_progress(
    goals: Iterable[Goal],
    transactions: Iterable[Transaction],
) -> list[GoalProgress]:
    """Return progress for every goal, in input order."""
    transactions = list(transactions)
    return [compute_goal_progress(goal, transactions) for goal in goals]


__all__ = [
    "compute_goal_current_amount",
    "compute_goal_progress",
    "compute_goals_progress",
]
