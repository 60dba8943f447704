"""Port for reading and writing an account's finance records."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from src.domain.models import (
    AffiliateProgram,
    DigitalProduct,
    Goal,
    Transaction,
)


@dataclass(frozen=True)
class FinanceRecords:
    """The four record lists of an account, read together."""

    transactions: list[Transaction]
    affiliate_programs: list[AffiliateProgram]
    digital_products: list[DigitalProduct]
    goals: list[Goal]


@dataclass(frozen=True)
class NewTransaction:
    """Transaction fields supplied by the write path."""

    type: str
    amount: Decimal
    category: str
    date: str
    description: str = ""
    is_tax_deductible: bool = False


@dataclass(frozen=True)
class TransactionUpdate:
    """Editable transaction fields; the type cannot change."""

    amount: Decimal
    category: str
    date: str
    description: str = ""
    is_tax_deductible: bool = False


@dataclass(frozen=True)
class NewAffiliateProgram:
    name: str
    clicks: int
    conversions: int
    commissions: Decimal


@dataclass(frozen=True)
class NewDigitalProduct:
    name: str
    sales: int
    gross_revenue: Decimal
    platform_fee: Decimal


@dataclass(frozen=True)
class NewGoal:
    type: str
    target_amount: Decimal
    month: str


class FinanceRepositoryPort(Protocol):
    """Port exposing account-scoped finance records."""

    def resolve_account_id(self, email: str | None) -> int | None:
        """Return the account id registered for an e-mail, if any."""

    def fetch_records(self, account_id: int) -> FinanceRecords:
        """Return all four record lists from a single read."""

    def fetch_transactions(self, account_id: int) -> list[Transaction]:
        """Return the account's transactions."""

    def fetch_affiliate_programs(
        self,
        account_id: int,
    ) -> list[AffiliateProgram]:
        """Return the account's affiliate programs."""

    def fetch_goals(self, account_id: int) -> list[Goal]:
        """Return the account's goals."""

    def ensure_user(self, email: str, name: str | None) -> bool:
        """Insert a user; return False when the e-mail already exists."""

    def add_transaction(
        self,
        account_id: int,
        transaction: NewTransaction,
    ) -> int:
        """Insert a transaction and return its id."""

    def update_transaction(
        self,
        account_id: int,
        transaction_id: int,
        update: TransactionUpdate,
    ) -> int:
        """Update a transaction and return the number of rows changed."""

    def delete_transactions(self, account_id: int, ids: list[int]) -> int:
        """Delete transactions and return the number of rows removed."""

    def categorize_transactions(
        self,
        account_id: int,
        ids: list[int],
        category: str,
    ) -> int:
        """Set the category of transactions and return rows changed."""

    def add_affiliate_program(
        self,
        account_id: int,
        program: NewAffiliateProgram,
    ) -> int:
        """Insert an affiliate program and return its id."""

    def add_digital_product(
        self,
        account_id: int,
        product: NewDigitalProduct,
    ) -> int:
        """Insert a digital product and return its id."""

    def add_goal(self, account_id: int, goal: NewGoal) -> int:
        """Insert a goal with a zero current amount and return its id."""


__all__ = [
    "FinanceRecords",
    "NewTransaction",
    "TransactionUpdate",
    "NewAffiliateProgram",
    "NewDigitalProduct",
    "NewGoal",
    "FinanceRepositoryPort",
]
