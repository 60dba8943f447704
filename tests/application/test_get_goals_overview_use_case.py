"""Tests for the GetGoalsOverviewUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_goals_overview import GetGoalsOverviewUseCase
from src.domain.models import Goal, IncomeForecast, Transaction


def test_execute_returns_progress_and_forecast() -> None:
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        Transaction(1, 1, "income", Decimal("1000"), "Ads", "2024-01-10"),
        Transaction(2, 1, "income", Decimal("1200"), "Ads", "2024-02-10"),
        Transaction(3, 1, "income", Decimal("1400"), "Ads", "2024-03-10"),
    ]
    repository.fetch_goals.return_value = [
        Goal(1, 1, "income", Decimal("1000"), "2024-03", Decimal("5")),
        Goal(2, 1, "income", Decimal("4000"), "2024-02"),
    ]

    use_case = GetGoalsOverviewUseCase(
        finance_repository=repository,
        logger=MagicMock(),
    )

    overview = use_case.execute(1)

    assert [item.completed for item in overview.goals] == [True, False]
    assert overview.goals[1].progress == Decimal("30")
    assert isinstance(overview.forecast, IncomeForecast)
    assert overview.forecast.amount == Decimal("1600")
