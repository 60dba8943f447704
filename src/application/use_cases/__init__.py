"""Application use cases package."""

from .get_annual_report import GetAnnualReportUseCase
from .get_dashboard import GetDashboardUseCase
from .get_goals_overview import GetGoalsOverviewUseCase, GoalsOverview
from .list_transactions import ListTransactionsUseCase, TransactionListing
from .manage_transactions import ManageTransactionsUseCase
from .record_entries import (
    RecordAffiliateProgramUseCase,
    RecordDigitalProductUseCase,
    RecordGoalUseCase,
)
from .register_user import RegisterUserUseCase
from .resolve_account import ResolveAccountUseCase

__all__ = [
    "GetAnnualReportUseCase",
    "GetDashboardUseCase",
    "GetGoalsOverviewUseCase",
    "GoalsOverview",
    "ListTransactionsUseCase",
    "ManageTransactionsUseCase",
    "RecordAffiliateProgramUseCase",
    "RecordDigitalProductUseCase",
    "RecordGoalUseCase",
    "RegisterUserUseCase",
    "ResolveAccountUseCase",
    "TransactionListing",
]
