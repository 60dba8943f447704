"""Use cases recording affiliate programs, digital products and goals."""

from src.application.ports.finance_repository import (
    FinanceRepositoryPort,
    NewAffiliateProgram,
    NewDigitalProduct,
    NewGoal,
)
from src.application.use_cases.input_validation import (
    require_amount,
    require_choice,
    require_count,
    require_month,
    require_name,
)
from src.domain.constants import GOAL_TYPES
from src.infrastructure.logging.logger import get_app_logger


class RecordAffiliateProgramUseCase:
    """Validate and store an affiliate program."""

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
        name: str,
        clicks: int,
        conversions: int,
        commissions,
    ) -> int:
        program = NewAffiliateProgram(
            name=require_name(name),
            clicks=require_count(clicks, "clicks"),
            conversions=require_count(conversions, "conversions"),
            commissions=require_amount(commissions, "commissions"),
        )
        if program.conversions > program.clicks:
            self._logger.warning(
                f"Affiliate program {program.name} records more conversions "
                f"than clicks"
            )
        program_id = self._finance_repository.add_affiliate_program(
            account_id,
            program,
        )
        self._logger.info(
            f"Added affiliate program {program_id} for account {account_id}"
        )
        return program_id


class RecordDigitalProductUseCase:
    """Validate and store a digital product."""

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
        name: str,
        sales: int,
        gross_revenue,
        platform_fee,
    ) -> int:
        product = NewDigitalProduct(
            name=require_name(name),
            sales=require_count(sales, "sales"),
            gross_revenue=require_amount(gross_revenue, "gross_revenue"),
            platform_fee=require_amount(platform_fee, "platform_fee"),
        )
        if product.platform_fee > product.gross_revenue:
            self._logger.warning(
                f"Digital product {product.name} has a platform fee above "
                f"its gross revenue"
            )
        product_id = self._finance_repository.add_digital_product(
            account_id,
            product,
        )
        self._logger.info(
            f"Added digital product {product_id} for account {account_id}"
        )
        return product_id


class RecordGoalUseCase:
    """Validate and store a monthly goal."""

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
        type: str,
        target_amount,
        month: str,
    ) -> int:
        """Insert a goal; its stored current amount starts at zero.

        Raises:
            ValueError: If the type, target or month is invalid.
        """
        goal = NewGoal(
            type=require_choice(type, GOAL_TYPES, "type"),
            target_amount=require_amount(
                target_amount, "target_amount", positive=True
            ),
            month=require_month(month),
        )
        goal_id = self._finance_repository.add_goal(account_id, goal)
        self._logger.info(
            f"Added {goal.type} goal {goal_id} for {goal.month} "
            f"on account {account_id}"
        )
        return goal_id


__all__ = [
    "RecordAffiliateProgramUseCase",
    "RecordDigitalProductUseCase",
    "RecordGoalUseCase",
]
