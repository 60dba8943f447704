"""Tests for the GetAnnualReportUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_annual_report import GetAnnualReportUseCase
from src.domain.models import Transaction


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        Transaction(1, 2, "income", Decimal("100"), "Ads", "2023-06-01"),
        Transaction(2, 2, "income", Decimal("400"), "Ads", "2024-06-01"),
        Transaction(3, 2, "expense", Decimal("30"), "Tools", "2023-07-01"),
    ]
    repository.fetch_affiliate_programs.return_value = []
    return repository


def test_execute_scopes_report_to_year() -> None:
    repository = _repository()

    use_case = GetAnnualReportUseCase(
        finance_repository=repository,
        logger=MagicMock(),
    )

    report = use_case.execute(2, "2023")

    repository.fetch_transactions.assert_called_once_with(2)
    assert report.summary.revenue == Decimal("100")
    assert report.summary.expenses == Decimal("30")
    assert report.income_by_category == {"Ads": Decimal("100")}
    assert [month.month for month in report.months] == ["2023-06", "2023-07"]


@pytest.mark.parametrize("year", ["23", "2023-01", "", None, "abcd"])
def test_execute_rejects_invalid_year(year) -> None:
    repository = _repository()
    use_case = GetAnnualReportUseCase(
        finance_repository=repository,
        logger=MagicMock(),
    )

    with pytest.raises(ValueError):
        use_case.execute(2, year)

    repository.fetch_transactions.assert_not_called()
