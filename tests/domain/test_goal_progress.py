"""Tests for live goal progress."""

from decimal import Decimal

from src.domain.models import Goal, Transaction
from src.domain.services.goals import (
    compute_goal_current_amount,
    compute_goal_progress,
    compute_goals_progress,
)


def _tx(tx_id: int, tx_type: str, amount: str, date: str) -> Transaction:
    return Transaction(
        id=tx_id,
        account_id=1,
        type=tx_type,
        amount=Decimal(amount),
        category="General",
        date=date,
    )


def _goal(
    goal_id: int,
    goal_type: str,
    target: str,
    month: str,
    stored: str = "0",
) -> Goal:
    return Goal(
        id=goal_id,
        account_id=1,
        type=goal_type,
        target_amount=Decimal(target),
        month=month,
        current_amount=Decimal(stored),
    )


MARCH = [
    _tx(1, "income", "600", "2024-03-04"),
    _tx(2, "income", "500", "2024-03-18"),
    _tx(3, "expense", "300", "2024-03-20"),
    _tx(4, "income", "9000", "2024-04-01"),
    _tx(5, "expense", "40", "2024-02-29"),
]


def test_profit_goal_uses_income_minus_expenses_of_the_month() -> None:
    """Profit goal of 1000 with 1100 income and 300 expense is 80 percent."""
    progress = compute_goal_progress(_goal(1, "profit", "1000", "2024-03"), MARCH)

    assert progress.current_amount == Decimal("800")
    assert progress.progress == Decimal("80.0")
    assert progress.completed is False


def test_income_goal_is_capped_at_one_hundred() -> None:
    progress = compute_goal_progress(_goal(1, "income", "1000", "2024-03"), MARCH)

    assert progress.current_amount == Decimal("1100")
    assert progress.progress == Decimal("100")
    assert progress.completed is True


def test_stored_current_amount_is_ignored() -> None:
    goal = _goal(1, "income", "1000", "2024-03", stored="999999")

    assert compute_goal_current_amount(goal, MARCH) == Decimal("1100")


def test_month_without_transactions_yields_zero() -> None:
    progress = compute_goal_progress(_goal(1, "income", "500", "2025-01"), MARCH)

    assert progress.current_amount == 0
    assert progress.progress == 0
    assert progress.completed is False


def test_zero_target_uses_one_as_denominator() -> None:
    """A zero target must not divide by zero."""
    progress = compute_goal_progress(_goal(1, "profit", "0", "2024-02"), MARCH)

    assert progress.current_amount == Decimal("-40")
    assert progress.progress == Decimal("-4000")


def test_negative_profit_reports_negative_progress() -> None:
    progress = compute_goal_progress(_goal(1, "profit", "200", "2024-02"), MARCH)

    assert progress.progress == Decimal("-20")
    assert progress.completed is False


def test_goals_are_independent_and_keep_input_order() -> None:
    goals = [
        _goal(1, "income", "2000", "2024-04"),
        _goal(2, "profit", "1000", "2024-03"),
        _goal(3, "savings", "1000", "2024-03"),
    ]

    results = compute_goals_progress(goals, iter(MARCH))

    assert [item.goal.id for item in results] == [1, 2, 3]
    assert results[0].progress == Decimal("100")
    assert results[1].current_amount == Decimal("800")
    assert results[2].current_amount == 0
