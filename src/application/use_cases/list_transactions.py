"""Use case behind the revenue and expense tables."""

from dataclasses import dataclass

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases.input_validation import (
    require_choice,
    require_iso_date,
)
from src.domain.constants import TRANSACTION_TYPES
from src.domain.models import MonthlyAmount, Transaction, TransactionTotals
from src.domain.services.finance import (
    compute_monthly_totals,
    compute_transaction_totals,
    filter_transactions,
)
from src.domain.services.snapshot import build_account_snapshot
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class TransactionListing:
    """Filtered transactions with their totals.

    Attributes:
        transactions: Matching transactions in store order.
        totals: Count, total and tax-deductible total of the matches.
        monthly_totals: Per-month totals of the matches, newest month first.
    """

    transactions: list[Transaction]
    totals: TransactionTotals
    monthly_totals: list[MonthlyAmount]


class ListTransactionsUseCase:
    """Filter an account's transactions and total the result."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
    ) -> None:
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account_id: int,
        *,
        transaction_type: str | None = None,
        search: str | None = None,
        category: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> TransactionListing:
        """Return the account's transactions matching every given filter.

        Args:
            account_id: Account whose transactions are listed.
            transaction_type: Optional "income" or "expense".
            search: Case-insensitive text matched in description or category.
            category: Exact category.
            start_date: Inclusive lower YYYY-MM-DD bound.
            end_date: Inclusive upper YYYY-MM-DD bound.

        Returns:
            TransactionListing: Matches, totals and monthly totals.

        Raises:
            ValueError: If the type or a date bound is malformed.
        """
        if transaction_type:
            transaction_type = require_choice(
                transaction_type, TRANSACTION_TYPES, "type"
            )
        if start_date:
            start_date = require_iso_date(start_date)
        if end_date:
            end_date = require_iso_date(end_date)

        snapshot = build_account_snapshot(
            account_id,
            transactions=self._finance_repository.fetch_transactions(
                account_id
            ),
            affiliate_programs=(),
            digital_products=(),
            goals=(),
            logger=self._logger,
        )
        matches = filter_transactions(
            snapshot.transactions,
            transaction_type=transaction_type,
            search=search,
            category=category,
            start_date=start_date,
            end_date=end_date,
        )
        totals = compute_transaction_totals(matches)
        self._logger.info(
            f"Listed {totals.count} of {len(snapshot.transactions)} "
            f"transactions for account {account_id}"
        )
        return TransactionListing(
            transactions=matches,
            totals=totals,
            monthly_totals=compute_monthly_totals(matches),
        )


__all__ = ["ListTransactionsUseCase", "TransactionListing"]
