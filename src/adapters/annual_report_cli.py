"""CLI adapter printing a calendar-year report for an account."""

from datetime import date
import os

from src.application.use_cases.fx_utils import convert_amount, format_money
from src.application.use_cases.get_annual_report import (
    GetAnnualReportUseCase,
)
from src.application.use_cases.resolve_account import ResolveAccountUseCase
from src.infrastructure.container import (
    build_finance_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> None:
    """Print the REPORT_YEAR report of the account owning DASHBOARD_EMAIL."""
    logger = get_app_logger()
    settings = build_settings()
    currency = settings.display_currency
    repository = build_finance_repository()
    year = os.getenv("REPORT_YEAR") or str(date.today().year)

    account_id = ResolveAccountUseCase(
        repository,
        demo_account_id=settings.demo_account_id,
        logger=logger,
    ).execute(os.getenv("DASHBOARD_EMAIL"))
    get_usage_logger().info(
        f"annual_report_cli account={account_id} year={year}"
    )

    try:
        report = GetAnnualReportUseCase(repository, logger=logger).execute(
            account_id,
            year,
        )
    except ValueError as exc:
        logger.error(str(exc))
        return

    def money(value) -> str:
        return format_money(convert_amount(value, currency, logger), currency)

    print(f"Annual report {report.year} (account {account_id}, {currency})")
    print(
        f"Revenue: {money(report.summary.revenue)}, "
        f"expenses: {money(report.summary.expenses)}, "
        f"net profit: {money(report.summary.net_profit)}"
    )
    print("Income by category:")
    for category, amount in sorted(report.income_by_category.items()):
        print(f"  {category}: {money(amount)}")
    print("Expenses by category:")
    for category, amount in sorted(report.expenses_by_category.items()):
        print(f"  {category}: {money(amount)}")
    print("Months:")
    for month in report.months:
        print(
            f"  {month.month}: income {money(month.income)}, "
            f"expense {money(month.expense)}, profit {money(month.profit)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
