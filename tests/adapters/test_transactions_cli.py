"""Tests for the transactions CLI adapter."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.adapters import transactions_cli
from src.domain.models import Transaction


FILTER_VARS = (
    "TRANSACTION_TYPE",
    "TRANSACTION_SEARCH",
    "TRANSACTION_CATEGORY",
    "START_DATE",
    "END_DATE",
)


@pytest.fixture
def repository(monkeypatch):
    repo = MagicMock()
    repo.resolve_account_id.return_value = 3
    repo.fetch_transactions.return_value = [
        Transaction(1, 3, "income", Decimal("500"), "Ads", "2024-01-10"),
        Transaction(
            2, 3, "expense", Decimal("120"), "Gear", "2024-01-15", "Mic", True
        ),
        Transaction(3, 3, "expense", Decimal("80"), "Software", "2024-02-03"),
    ]
    for name in FILTER_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(
        transactions_cli,
        "build_settings",
        lambda: SimpleNamespace(demo_account_id=1, display_currency="USD"),
    )
    monkeypatch.setattr(
        transactions_cli,
        "build_finance_repository",
        lambda: repo,
    )
    monkeypatch.setattr(
        transactions_cli,
        "get_usage_logger",
        lambda: MagicMock(),
    )
    return repo


def test_main_prints_filtered_expenses(monkeypatch, capsys, repository) -> None:
    monkeypatch.setenv("TRANSACTION_TYPE", "expense")
    monkeypatch.setattr(transactions_cli, "get_app_logger", lambda: MagicMock())

    transactions_cli.main()

    assert capsys.readouterr().out.splitlines() == [
        "2024-01-15 expense Gear: $120.00 (tax deductible) Mic",
        "2024-02-03 expense Software: $80.00",
        "2 transactions, total $200.00, tax deductible $120.00",
        "Monthly totals:",
        "  2024-02: $80.00",
        "  2024-01: $120.00",
    ]


def test_main_logs_malformed_date(monkeypatch, capsys, repository) -> None:
    logger = MagicMock()
    monkeypatch.setenv("START_DATE", "yesterday")
    monkeypatch.setattr(transactions_cli, "get_app_logger", lambda: logger)

    transactions_cli.main()

    assert capsys.readouterr().out == ""
    logger.error.assert_called_once()
    repository.fetch_transactions.assert_not_called()
