"""Use case for the transaction write path.

Input is validated here before it reaches the store; the aggregation engine
trusts whatever the store returns.
"""

from src.application.ports.finance_repository import (
    FinanceRepositoryPort,
    NewTransaction,
    TransactionUpdate,
)
from src.application.use_cases.input_validation import (
    require_amount,
    require_category,
    require_choice,
    require_ids,
    require_iso_date,
)
from src.domain.constants import TRANSACTION_TYPES
from src.infrastructure.logging.logger import get_app_logger


class ManageTransactionsUseCase:
    """Create, edit, delete and re-categorize an account's transactions."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing write access to transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()

    def add(
        self,
        account_id: int,
        *,
        type: str,
        amount,
        category: str,
        date: str,
        description: str = "",
        is_tax_deductible: bool = False,
    ) -> int:
        """Validate and insert a transaction.

        Returns:
            int: Identifier of the new transaction.

        Raises:
            ValueError: If any field is invalid.
        """
        transaction = NewTransaction(
            type=require_choice(type, TRANSACTION_TYPES, "type"),
            amount=require_amount(amount, "amount"),
            category=require_category(category),
            date=require_iso_date(date),
            description=(description or "").strip(),
            is_tax_deductible=bool(is_tax_deductible),
        )
        transaction_id = self._finance_repository.add_transaction(
            account_id,
            transaction,
        )
        self._logger.info(
            f"Added {transaction.type} transaction {transaction_id} "
            f"for account {account_id}"
        )
        return transaction_id

    def update(
        self,
        account_id: int,
        transaction_id: int,
        *,
        amount,
        category: str,
        date: str,
        description: str = "",
        is_tax_deductible: bool = False,
    ) -> bool:
        """Validate and apply an edit; return False when nothing matched."""
        update = TransactionUpdate(
            amount=require_amount(amount, "amount"),
            category=require_category(category),
            date=require_iso_date(date),
            description=(description or "").strip(),
            is_tax_deductible=bool(is_tax_deductible),
        )
        changed = self._finance_repository.update_transaction(
            account_id,
            transaction_id,
            update,
        )
        if not changed:
            self._logger.warning(
                f"Transaction {transaction_id} not found for account "
                f"{account_id}"
            )
        return changed > 0

    def delete_many(self, account_id: int, ids) -> int:
        """Delete the account's transactions with the given ids.

        Raises:
            ValueError: If ids is not a non-empty list of integers.
        """
        ids = require_ids(ids)
        deleted = self._finance_repository.delete_transactions(account_id, ids)
        self._logger.info(
            f"Deleted {deleted} of {len(ids)} transactions "
            f"for account {account_id}"
        )
        return deleted

    def categorize_many(self, account_id: int, ids, category: str) -> int:
        """Assign one category to the account's transactions with the ids.

        Raises:
            ValueError: If ids are invalid or the category is blank.
        """
        ids = require_ids(ids)
        category = require_category(category)
        updated = self._finance_repository.categorize_transactions(
            account_id,
            ids,
            category,
        )
        self._logger.info(
            f"Categorized {updated} transactions as {category!r} "
            f"for account {account_id}"
        )
        return updated


__all__ = ["ManageTransactionsUseCase"]
