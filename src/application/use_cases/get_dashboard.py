"""Use case to compute every dashboard figure for an account."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models import DashboardView, IncomeForecast
from src.domain.services.dashboard import compute_dashboard
from src.domain.services.snapshot import build_account_snapshot
from src.domain.services.validation import (
    validate_affiliate_programs,
    validate_digital_products,
    validate_transactions,
)
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardUseCase:
    """Read an account snapshot and run the aggregation engine on it."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing the account's records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()

    def execute(self, account_id: int) -> DashboardView:
        """Return the dashboard view of the account.

        Args:
            account_id: Account whose records are aggregated.

        Returns:
            DashboardView: Summary, breakdowns, rollups, goals and forecast.
        """
        records = self._finance_repository.fetch_records(account_id)
        self._logger.info(
            f"Fetched {len(records.transactions)} transactions, "
            f"{len(records.affiliate_programs)} affiliate programs, "
            f"{len(records.digital_products)} digital products and "
            f"{len(records.goals)} goals for account {account_id}"
        )
        snapshot = build_account_snapshot(
            account_id,
            transactions=records.transactions,
            affiliate_programs=records.affiliate_programs,
            digital_products=records.digital_products,
            goals=records.goals,
            logger=self._logger,
        )
        validate_transactions(snapshot.transactions, self._logger)
        validate_affiliate_programs(snapshot.affiliate_programs, self._logger)
        validate_digital_products(snapshot.digital_products, self._logger)

        view = compute_dashboard(snapshot)
        forecast_state = (
            f"forecast={view.forecast.amount}"
            if isinstance(view.forecast, IncomeForecast)
            else "forecast=insufficient data"
        )
        self._logger.info(
            f"Dashboard computed for account {account_id}: "
            f"revenue={view.summary.revenue}, "
            f"expenses={view.summary.expenses}, "
            f"net_profit={view.summary.net_profit}, {forecast_state}"
        )
        return view


__all__ = ["GetDashboardUseCase", "DashboardView"]
