"""Tests for the dashboard CLI adapter."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters import dashboard_cli
from src.application.ports.finance_repository import FinanceRecords
from src.domain.models import (
    AccountSnapshot,
    AffiliateProgram,
    DigitalProduct,
    Goal,
    Transaction,
)
from src.domain.services.dashboard import compute_dashboard


TRANSACTIONS = [
    Transaction(1, 1, "income", Decimal("1000"), "Ads", "2024-01-05"),
    Transaction(2, 1, "income", Decimal("1200"), "Ads", "2024-02-05"),
    Transaction(3, 1, "income", Decimal("1400"), "Courses", "2024-03-05"),
    Transaction(4, 1, "expense", Decimal("300"), "Software", "2024-03-07"),
]
PROGRAMS = [AffiliateProgram(1, 1, "Store", 100, 4, Decimal("60"))]
PRODUCTS = [DigitalProduct(1, 1, "Preset pack", 9, Decimal("90"), Decimal("9"))]
GOALS = [Goal(1, 1, "profit", Decimal("2200"), "2024-03")]


def _full_view():
    return compute_dashboard(
        AccountSnapshot(
            account_id=1,
            transactions=tuple(TRANSACTIONS),
            affiliate_programs=tuple(PROGRAMS),
            digital_products=tuple(PRODUCTS),
            goals=tuple(GOALS),
        )
    )


def test_render_dashboard_lists_every_section() -> None:
    lines = dashboard_cli.render_dashboard(_full_view(), "USD", MagicMock())

    assert lines[0] == "Account 1 (USD)"
    assert "Revenue: $3,600.00" in lines
    assert "Expenses: $300.00" in lines
    assert "Net profit: $3,300.00" in lines
    assert "Affiliate earnings: $60.00" in lines
    assert "  2024-03: $1,400.00" in lines
    assert (
        "Affiliate: clicks=100, conversions=4, rate=4.00%, EPC=$0.60" in lines
    )
    assert "Top affiliate: Store ($60.00)" in lines
    assert "  #1 Preset pack: 9 sales, net $81.00" in lines
    assert (
        "  profit 2024-03: $1,100.00 / $2,200.00 (50.0%, in progress)"
        in lines
    )
    assert lines[-1] == "Forecast 2024-04: $1,600.00 (+14.3% vs last month)"


def test_render_dashboard_converts_to_display_currency() -> None:
    lines = dashboard_cli.render_dashboard(_full_view(), "EUR", MagicMock())

    assert "Revenue: €3,312.00" in lines
    assert "Expenses: €276.00" in lines


def test_render_dashboard_reports_missing_forecast() -> None:
    view = compute_dashboard(AccountSnapshot(account_id=2))

    lines = dashboard_cli.render_dashboard(view, "USD", MagicMock())

    assert "Revenue: $0.00" in lines
    assert "Goals:" in lines
    assert not any(line.startswith("Top affiliate") for line in lines)
    assert lines[-1] == (
        "Forecast unavailable: need at least 3 months of income history "
        "(0 available)."
    )


def test_main_falls_back_to_demo_account(monkeypatch, capsys) -> None:
    """Unknown e-mails should print the demo account's dashboard."""
    repository = MagicMock()
    repository.resolve_account_id.return_value = None
    repository.fetch_records.return_value = FinanceRecords(
        transactions=[
            Transaction(1, 7, "income", Decimal("250"), "Ads", "2024-05-02")
        ],
        affiliate_programs=[],
        digital_products=[],
        goals=[],
    )
    usage_logger = MagicMock()

    monkeypatch.setenv("DASHBOARD_EMAIL", "nobody@example.com")
    monkeypatch.setattr(
        dashboard_cli,
        "build_settings",
        lambda: SimpleNamespace(demo_account_id=7, display_currency="USD"),
    )
    monkeypatch.setattr(
        dashboard_cli,
        "build_finance_repository",
        lambda: repository,
    )
    monkeypatch.setattr(dashboard_cli, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(
        dashboard_cli,
        "get_usage_logger",
        lambda: usage_logger,
    )

    dashboard_cli.main()

    output = capsys.readouterr().out
    repository.resolve_account_id.assert_called_once_with("nobody@example.com")
    repository.fetch_records.assert_called_once_with(7)
    usage_logger.info.assert_called_once_with("dashboard_cli account=7")
    assert "Account 7 (USD)" in output
    assert "Revenue: $250.00" in output
