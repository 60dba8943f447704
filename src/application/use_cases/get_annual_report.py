"""Use case to build a calendar-year report for an account."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases.input_validation import require_year
from src.domain.models import AnnualReport
from src.domain.services.reports import compute_annual_report
from src.domain.services.snapshot import build_account_snapshot
from src.infrastructure.logging.logger import get_app_logger


class GetAnnualReportUseCase:
    """Compute a year-scoped summary with category and month breakdowns."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
    ) -> None:
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()

    def execute(self, account_id: int, year: str) -> AnnualReport:
        """Return the report of the account for the year.

        Args:
            account_id: Account whose records are reported.
            year: Four-digit year.

        Returns:
            AnnualReport: Summary and breakdowns restricted to the year.

        Raises:
            ValueError: If the year is not a four-digit string.
        """
        year = require_year(year)
        snapshot = build_account_snapshot(
            account_id,
            transactions=self._finance_repository.fetch_transactions(
                account_id
            ),
            affiliate_programs=(
                self._finance_repository.fetch_affiliate_programs(account_id)
            ),
            digital_products=(),
            goals=(),
            logger=self._logger,
        )
        report = compute_annual_report(
            year,
            snapshot.transactions,
            snapshot.affiliate_programs,
        )
        self._logger.info(
            f"Annual report {year} for account {account_id}: "
            f"revenue={report.summary.revenue}, "
            f"expenses={report.summary.expenses}, months={len(report.months)}"
        )
        return report


__all__ = ["GetAnnualReportUseCase", "AnnualReport"]
