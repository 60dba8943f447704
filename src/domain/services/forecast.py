"""Short-term income forecast.

The forecast is a two-point linear extrapolation over the last three months
of income: trend = (a2 - a0) / 2 and forecast = a2 + trend, floored at zero.
Fewer than three months of history yields InsufficientData instead of a
number.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from src.domain.constants import FORECAST_HISTORY_MONTHS, MIN_FORECAST_MONTHS
from src.domain.models import (
    ForecastResult,
    IncomeForecast,
    InsufficientData,
    MonthlyAmount,
    Transaction,
)
from src.domain.services.finance import compute_income_by_month
from src.domain.services.normalization import next_month
from src.utils.decimal_utils import HUNDRED, ZERO


def compute_income_forecast(
    income_by_month: Mapping[str, Decimal],
) -> ForecastResult:
    """Forecast next month's income from monthly income totals.

    Args:
        income_by_month: Income per YYYY-MM month, in any order.

    Returns:
        ForecastResult: IncomeForecast, or InsufficientData when fewer than
        three months are available.
    """
    months = sorted(income_by_month)
    if len(months) < MIN_FORECAST_MONTHS:
        return InsufficientData(
            months_available=len(months),
            months_required=MIN_FORECAST_MONTHS,
        )

    oldest, _, latest = (
        income_by_month[month] for month in months[-MIN_FORECAST_MONTHS:]
    )
    trend = (latest - oldest) / 2
    amount = latest + trend
    if amount < 0:
        amount = ZERO
    growth_percent = trend / latest * HUNDRED if latest > 0 else ZERO

    history = [
        MonthlyAmount(month=month, amount=income_by_month[month])
        for month in months[-FORECAST_HISTORY_MONTHS:]
    ]
    return IncomeForecast(
        month=next_month(months[-1]),
        amount=amount,
        trend=trend,
        growth_percent=growth_percent,
        history=history,
    )


def forecast_from_transactions(
    transactions: Iterable[Transaction],
) -> ForecastResult:
    """Group income by month and forecast the following month."""
    return compute_income_forecast(compute_income_by_month(transactions))


__all__ = ["compute_income_forecast", "forecast_from_transactions"]
