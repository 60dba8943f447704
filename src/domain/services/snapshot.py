"""Account scoping for record snapshots."""

from collections.abc import Iterable
from logging import Logger
from typing import TypeVar

from src.domain.models import (
    AccountSnapshot,
    AffiliateProgram,
    DigitalProduct,
    Goal,
    Transaction,
)

_Record = TypeVar("_Record")


def _scope(
    records: Iterable[_Record],
    account_id: int,
    label: str,
    logger: Logger,
) -> tuple[_Record, ...]:
    kept = []
    for record in records:
        if record.account_id != account_id:
            logger.warning(
                f"Dropping {label} id={record.id} owned by account "
                f"{record.account_id}, expected {account_id}"
            )
            continue
        kept.append(record)
    return tuple(kept)


def build_account_snapshot(
    account_id: int,
    *,
    transactions: Iterable[Transaction],
    affiliate_programs: Iterable[AffiliateProgram],
    digital_products: Iterable[DigitalProduct],
    goals: Iterable[Goal],
    logger: Logger,
) -> AccountSnapshot:
    """Bundle an account's records, dropping any owned by another account.

    Args:
        account_id: Account the snapshot belongs to.
        transactions: Transactions read from the store.
        affiliate_programs: Affiliate programs read from the store.
        digital_products: Digital products read from the store.
        goals: Goals read from the store.
        logger: Logger used for warnings about foreign records.

    Returns:
        AccountSnapshot: Records guaranteed to belong to account_id.
    """
    return AccountSnapshot(
        account_id=account_id,
        transactions=_scope(transactions, account_id, "transaction", logger),
        affiliate_programs=_scope(
            affiliate_programs, account_id, "affiliate program", logger
        ),
        digital_products=_scope(
            digital_products, account_id, "digital product", logger
        ),
        goals=_scope(goals, account_id, "goal", logger),
    )


__all__ = ["build_account_snapshot"]
