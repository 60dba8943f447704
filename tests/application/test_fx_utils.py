"""Tests for display currency helpers."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.fx_utils import convert_amount, format_money


def test_convert_amount_uses_fixed_rate() -> None:
    logger = MagicMock()

    assert convert_amount(Decimal("100"), "EUR", logger) == Decimal("92.00")
    assert convert_amount(Decimal("100"), "USD", logger) == Decimal("100")
    logger.warning.assert_not_called()


def test_convert_amount_warns_on_unknown_currency() -> None:
    logger = MagicMock()

    assert convert_amount(Decimal("5"), "GBP", logger) == Decimal("5")
    logger.warning.assert_called_once()


def test_format_money() -> None:
    assert format_money(Decimal("1234.5"), "USD") == "$1,234.50"
    assert format_money(Decimal("-3"), "EUR") == "-€3.00"
    assert format_money(Decimal("1"), "GBP") == "GBP 1.00"
