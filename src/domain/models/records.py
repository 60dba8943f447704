"""Domain models for stored creator finance records."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """Dated income or expense record.

    Attributes:
        id: Store identifier.
        account_id: Owning account.
        type: Either "income" or "expense"; the amount is never negative.
        amount: Non-negative monetary amount.
        category: Free-form category label.
        date: ISO calendar date (YYYY-MM-DD).
        description: Free-form description.
        is_tax_deductible: Whether the record counts as deductible.
    """

    id: int
    account_id: int
    type: str
    amount: Decimal
    category: str
    date: str
    description: str = ""
    is_tax_deductible: bool = False


@dataclass(frozen=True)
class AffiliateProgram:
    """Affiliate partnership tracked by clicks and commissions."""

    id: int
    account_id: int
    name: str
    clicks: int
    conversions: int
    commissions: Decimal


@dataclass(frozen=True)
class DigitalProduct:
    """Digital product tracked by unit sales and revenue."""

    id: int
    account_id: int
    name: str
    sales: int
    gross_revenue: Decimal
    platform_fee: Decimal

    @property
    def net_revenue(self) -> Decimal:
        """Return gross revenue minus the platform fee."""
        return self.gross_revenue - self.platform_fee


@dataclass(frozen=True)
class Goal:
    """Monthly income or profit target.

    The stored current_amount is informational only; progress is always
    recomputed from transactions.
    """

    id: int
    account_id: int
    type: str
    target_amount: Decimal
    month: str
    current_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class AccountSnapshot:
    """The four record lists of one account at one point in time."""

    account_id: int
    transactions: tuple[Transaction, ...] = field(default_factory=tuple)
    affiliate_programs: tuple[AffiliateProgram, ...] = field(
        default_factory=tuple
    )
    digital_products: tuple[DigitalProduct, ...] = field(
        default_factory=tuple
    )
    goals: tuple[Goal, ...] = field(default_factory=tuple)


__all__ = [
    "Transaction",
    "AffiliateProgram",
    "DigitalProduct",
    "Goal",
    "AccountSnapshot",
]
