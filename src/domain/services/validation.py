"""Domain validation helpers.

These helpers only warn: records reaching the engine are trusted, and
rejection belongs to the write path.
"""

from collections.abc import Iterable
from logging import Logger

from src.domain.constants import TRANSACTION_TYPES
from src.domain.models import AffiliateProgram, DigitalProduct, Transaction


def validate_transactions(
    transactions: Iterable[Transaction],
    logger: Logger,
) -> None:
    """Warn about transactions violating sign or type conventions.

    Args:
        transactions: Transactions read from the store.
        logger: Logger used for warnings.
    """
    for transaction in transactions:
        if transaction.type not in TRANSACTION_TYPES:
            logger.warning(
                f"Unknown transaction type for id={transaction.id}: "
                f"{transaction.type}"
            )
        if transaction.amount < 0:
            logger.warning(
                f"Transaction amount is negative for id={transaction.id}: "
                f"{transaction.amount}"
            )


def validate_affiliate_programs(
    programs: Iterable[AffiliateProgram],
    logger: Logger,
) -> None:
    """Warn when conversions exceed clicks."""
    for program in programs:
        if program.conversions > program.clicks:
            logger.warning(
                f"Affiliate program {program.name} has more conversions "
                f"({program.conversions}) than clicks ({program.clicks})"
            )


def validate_digital_products(
    products: Iterable[DigitalProduct],
    logger: Logger,
) -> None:
    """Warn when platform fees exceed gross revenue."""
    for product in products:
        if product.platform_fee > product.gross_revenue:
            logger.warning(
                f"Digital product {product.name} has a platform fee "
                f"({product.platform_fee}) above its gross revenue "
                f"({product.gross_revenue})"
            )


__all__ = [
    "validate_transactions",
    "validate_affiliate_programs",
    "validate_digital_products",
]
