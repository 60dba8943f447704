"""Tests for recording affiliate programs, products and goals."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.finance_repository import (
    NewAffiliateProgram,
    NewDigitalProduct,
    NewGoal,
)
from src.application.use_cases.record_entries import (
    RecordAffiliateProgramUseCase,
    RecordDigitalProductUseCase,
    RecordGoalUseCase,
)


def test_affiliate_program_is_inserted_with_warning_on_excess_conversions() -> None:
    repository = MagicMock()
    repository.add_affiliate_program.return_value = 7
    logger = MagicMock()

    program_id = RecordAffiliateProgramUseCase(repository, logger=logger).execute(
        2,
        name=" Camera store ",
        clicks=3,
        conversions=5,
        commissions="12.5",
    )

    assert program_id == 7
    repository.add_affiliate_program.assert_called_once_with(
        2,
        NewAffiliateProgram(
            name="Camera store",
            clicks=3,
            conversions=5,
            commissions=Decimal("12.5"),
        ),
    )
    logger.warning.assert_called_once()


def test_affiliate_program_rejects_negative_clicks() -> None:
    repository = MagicMock()

    with pytest.raises(ValueError):
        RecordAffiliateProgramUseCase(repository, logger=MagicMock()).execute(
            2, name="Store", clicks=-1, conversions=0, commissions="0"
        )

    repository.add_affiliate_program.assert_not_called()


def test_digital_product_is_inserted() -> None:
    repository = MagicMock()
    repository.add_digital_product.return_value = 3

    product_id = RecordDigitalProductUseCase(repository, logger=MagicMock()).execute(
        2,
        name="LUT pack",
        sales=10,
        gross_revenue=Decimal("150"),
        platform_fee=Decimal("15"),
    )

    assert product_id == 3
    repository.add_digital_product.assert_called_once_with(
        2,
        NewDigitalProduct(
            name="LUT pack",
            sales=10,
            gross_revenue=Decimal("150"),
            platform_fee=Decimal("15"),
        ),
    )


@pytest.mark.parametrize("field", ["gross_revenue", "platform_fee"])
def test_digital_product_requires_money_fields(field) -> None:
    repository = MagicMock()
    fields = {
        "name": "LUT pack",
        "sales": 10,
        "gross_revenue": Decimal("150"),
        "platform_fee": Decimal("15"),
    }
    fields[field] = None

    with pytest.raises(ValueError, match=f"{field} is required"):
        RecordDigitalProductUseCase(repository, logger=MagicMock()).execute(
            2, **fields
        )

    repository.add_digital_product.assert_not_called()


def test_goal_is_inserted() -> None:
    repository = MagicMock()
    repository.add_goal.return_value = 4

    goal_id = RecordGoalUseCase(repository, logger=MagicMock()).execute(
        2, type="Profit", target_amount="2500", month="2024-09"
    )

    assert goal_id == 4
    repository.add_goal.assert_called_once_with(
        2,
        NewGoal(type="profit", target_amount=Decimal("2500"), month="2024-09"),
    )


@pytest.mark.parametrize(
    "fields",
    [
        {"type": "savings", "target_amount": "10", "month": "2024-09"},
        {"type": "income", "target_amount": "0", "month": "2024-09"},
        {"type": "income", "target_amount": "10", "month": "2024-9"},
        {"type": "income", "target_amount": "10", "month": "2024-13"},
    ],
)
def test_goal_rejects_invalid_input(fields) -> None:
    repository = MagicMock()

    with pytest.raises(ValueError):
        RecordGoalUseCase(repository, logger=MagicMock()).execute(2, **fields)

    repository.add_goal.assert_not_called()
