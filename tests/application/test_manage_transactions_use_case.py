"""Tests for the ManageTransactionsUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.finance_repository import (
    NewTransaction,
    TransactionUpdate,
)
from src.application.use_cases.manage_transactions import (
    ManageTransactionsUseCase,
)


def _use_case() -> tuple[ManageTransactionsUseCase, MagicMock]:
    repository = MagicMock()
    return (
        ManageTransactionsUseCase(repository, logger=MagicMock()),
        repository,
    )


def test_add_normalizes_and_inserts() -> None:
    use_case, repository = _use_case()
    repository.add_transaction.return_value = 11

    transaction_id = use_case.add(
        3,
        type=" Expense",
        amount="49.99",
        category=" Software ",
        date="2024-05-02",
        description=" Editing suite ",
        is_tax_deductible=1,
    )

    assert transaction_id == 11
    repository.add_transaction.assert_called_once_with(
        3,
        NewTransaction(
            type="expense",
            amount=Decimal("49.99"),
            category="Software",
            date="2024-05-02",
            description="Editing suite",
            is_tax_deductible=True,
        ),
    )


@pytest.mark.parametrize(
    "overrides",
    [
        {"type": "refund"},
        {"amount": "-1"},
        {"amount": "ten"},
        {"amount": None},
        {"amount": "  "},
        {"category": "  "},
        {"date": "2024-13-01"},
        {"date": "05/02/2024"},
    ],
)
def test_add_rejects_invalid_input(overrides) -> None:
    use_case, repository = _use_case()
    fields = {
        "type": "income",
        "amount": "10",
        "category": "Ads",
        "date": "2024-05-02",
    }
    fields.update(overrides)

    with pytest.raises(ValueError):
        use_case.add(3, **fields)

    repository.add_transaction.assert_not_called()


def test_update_reports_missing_rows() -> None:
    use_case, repository = _use_case()
    repository.update_transaction.side_effect = [1, 0]

    assert use_case.update(
        3, 5, amount=Decimal("20"), category="Ads", date="2024-01-01"
    ) is True
    assert use_case.update(
        3, 6, amount=Decimal("20"), category="Ads", date="2024-01-01"
    ) is False
    repository.update_transaction.assert_any_call(
        3,
        5,
        TransactionUpdate(
            amount=Decimal("20"),
            category="Ads",
            date="2024-01-01",
        ),
    )


def test_bulk_operations_are_scoped_to_the_account() -> None:
    use_case, repository = _use_case()
    repository.delete_transactions.return_value = 2
    repository.categorize_transactions.return_value = 3

    assert use_case.delete_many(4, [1, 2]) == 2
    assert use_case.categorize_many(4, [1, 2, 3], " Courses ") == 3
    repository.delete_transactions.assert_called_once_with(4, [1, 2])
    repository.categorize_transactions.assert_called_once_with(
        4, [1, 2, 3], "Courses"
    )


@pytest.mark.parametrize("ids", [[], None, "1,2", [1, "2"], [True]])
def test_bulk_operations_reject_invalid_ids(ids) -> None:
    use_case, repository = _use_case()

    with pytest.raises(ValueError):
        use_case.delete_many(4, ids)
    with pytest.raises(ValueError):
        use_case.categorize_many(4, ids, "Ads")

    repository.delete_transactions.assert_not_called()
    repository.categorize_transactions.assert_not_called()


def test_categorize_requires_category() -> None:
    use_case, repository = _use_case()

    with pytest.raises(ValueError):
        use_case.categorize_many(4, [1], "")

    repository.categorize_transactions.assert_not_called()


def test_update_requires_amount() -> None:
    """A missing amount must not be stored as zero."""
    use_case, repository = _use_case()

    with pytest.raises(ValueError, match="amount is required"):
        use_case.update(3, 5, amount=None, category="Ads", date="2024-01-01")

    repository.update_transaction.assert_not_called()
