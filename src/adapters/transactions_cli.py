"""CLI adapter printing a filtered transaction table for an account."""

import os

from src.application.use_cases.fx_utils import convert_amount, format_money
from src.application.use_cases.list_transactions import (
    ListTransactionsUseCase,
)
from src.application.use_cases.resolve_account import ResolveAccountUseCase
from src.infrastructure.container import (
    build_finance_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> None:
    """Print transactions of the DASHBOARD_EMAIL account.

    Filters come from TRANSACTION_TYPE, TRANSACTION_SEARCH,
    TRANSACTION_CATEGORY, START_DATE and END_DATE; unset variables do not
    filter.
    """
    logger = get_app_logger()
    settings = build_settings()
    currency = settings.display_currency
    repository = build_finance_repository()

    account_id = ResolveAccountUseCase(
        repository,
        demo_account_id=settings.demo_account_id,
        logger=logger,
    ).execute(os.getenv("DASHBOARD_EMAIL"))
    get_usage_logger().info(f"transactions_cli account={account_id}")

    try:
        listing = ListTransactionsUseCase(repository, logger=logger).execute(
            account_id,
            transaction_type=os.getenv("TRANSACTION_TYPE"),
            search=os.getenv("TRANSACTION_SEARCH"),
            category=os.getenv("TRANSACTION_CATEGORY"),
            start_date=os.getenv("START_DATE"),
            end_date=os.getenv("END_DATE"),
        )
    except ValueError as exc:
        logger.error(str(exc))
        return

    def money(value) -> str:
        return format_money(convert_amount(value, currency, logger), currency)

    for transaction in listing.transactions:
        deductible = " (tax deductible)" if transaction.is_tax_deductible else ""
        print(
            f"{transaction.date} {transaction.type:<7} "
            f"{transaction.category}: {money(transaction.amount)}"
            f"{deductible} {transaction.description}".rstrip()
        )
    totals = listing.totals
    print(
        f"{totals.count} transactions, total {money(totals.total)}, "
        f"tax deductible {money(totals.tax_deductible)}"
    )
    print("Monthly totals:")
    for item in listing.monthly_totals:
        print(f"  {item.month}: {money(item.amount)}")


if __name__ == "__main__":  # pragma: no cover
    main()
