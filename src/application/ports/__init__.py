"""Application ports package."""

from .database import DatabaseEnginePort
from .finance_repository import (
    FinanceRecords,
    FinanceRepositoryPort,
    NewAffiliateProgram,
    NewDigitalProduct,
    NewGoal,
    NewTransaction,
    TransactionUpdate,
)

__all__ = [
    "DatabaseEnginePort",
    "FinanceRecords",
    "FinanceRepositoryPort",
    "NewAffiliateProgram",
    "NewDigitalProduct",
    "NewGoal",
    "NewTransaction",
    "TransactionUpdate",
]
