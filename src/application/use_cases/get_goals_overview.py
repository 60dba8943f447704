"""Use case to compute goal progress and the income forecast."""

from dataclasses import dataclass

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models import ForecastResult, GoalProgress
from src.domain.services.forecast import forecast_from_transactions
from src.domain.services.goals import compute_goals_progress
from src.domain.services.snapshot import build_account_snapshot
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class GoalsOverview:
    """Goal progress and the income forecast shown on the goals page."""

    goals: list[GoalProgress]
    forecast: ForecastResult


class GetGoalsOverviewUseCase:
    """Recompute goal progress live and forecast next month's income."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
    ) -> None:
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()

    def execute(self, account_id: int) -> GoalsOverview:
        """Return goal progress and the forecast for the account."""
        snapshot = build_account_snapshot(
            account_id,
            transactions=self._finance_repository.fetch_transactions(
                account_id
            ),
            affiliate_programs=(),
            digital_products=(),
            goals=self._finance_repository.fetch_goals(account_id),
            logger=self._logger,
        )
        progress = compute_goals_progress(
            snapshot.goals,
            snapshot.transactions,
        )
        completed = sum(1 for item in progress if item.completed)
        self._logger.info(
            f"Goals computed for account {account_id}: "
            f"{completed}/{len(progress)} completed"
        )
        return GoalsOverview(
            goals=progress,
            forecast=forecast_from_transactions(snapshot.transactions),
        )


__all__ = ["GetGoalsOverviewUseCase", "GoalsOverview"]
