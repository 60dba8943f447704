"""CLI adapter printing the dashboard figures of an account."""

import os

from src.application.use_cases.fx_utils import convert_amount, format_money
from src.application.use_cases.get_dashboard import GetDashboardUseCase
from src.application.use_cases.resolve_account import ResolveAccountUseCase
from src.domain.models import DashboardView, IncomeForecast
from src.infrastructure.container import (
    build_finance_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def render_dashboard(view: DashboardView, currency: str, logger) -> list[str]:
    """Return printable lines for a dashboard view.

    Args:
        view: Dashboard figures in the base currency.
        currency: Display currency code.
        logger: Logger used for conversion warnings.

    Returns:
        list[str]: Lines ready to print.
    """

    def money(value) -> str:
        return format_money(convert_amount(value, currency, logger), currency)

    summary = view.summary
    lines = [
        f"Account {view.account_id} ({currency})",
        f"Revenue: {money(summary.revenue)}",
        f"Expenses: {money(summary.expenses)}",
        f"Net profit: {money(summary.net_profit)}",
        f"Affiliate earnings: {money(summary.affiliate_earnings)}",
        "Revenue trend:",
    ]
    lines.extend(
        f"  {item.month}: {money(item.amount)}" for item in view.revenue_trend
    )

    affiliate = view.affiliate
    lines.append(
        f"Affiliate: clicks={affiliate.total_clicks}, "
        f"conversions={affiliate.total_conversions}, "
        f"rate={affiliate.avg_conversion_rate:.2f}%, "
        f"EPC={money(affiliate.epc)}"
    )
    if affiliate.top_program is not None:
        lines.append(
            f"Top affiliate: {affiliate.top_program.name} "
            f"({money(affiliate.top_program.commissions)})"
        )

    products = view.products
    lines.append(
        f"Products: sales={products.total_sales}, "
        f"gross={money(products.total_gross)}, "
        f"fees={money(products.total_fees)}, net={money(products.total_net)}"
    )
    lines.extend(
        f"  #{item.rank} {item.product.name}: {item.product.sales} sales, "
        f"net {money(item.net_revenue)}"
        for item in products.ranking
    )

    lines.append("Goals:")
    for item in view.goals:
        state = "completed" if item.completed else "in progress"
        lines.append(
            f"  {item.goal.type} {item.goal.month}: "
            f"{money(item.current_amount)} / "
            f"{money(item.goal.target_amount)} "
            f"({item.progress:.1f}%, {state})"
        )

    forecast = view.forecast
    if isinstance(forecast, IncomeForecast):
        lines.append(
            f"Forecast {forecast.month}: {money(forecast.amount)} "
            f"({forecast.growth_percent:+.1f}% vs last month)"
        )
    else:
        lines.append(
            "Forecast unavailable: need at least "
            f"{forecast.months_required} months of income history "
            f"({forecast.months_available} available)."
        )
    return lines


def main() -> None:
    """Print the dashboard of the account owning DASHBOARD_EMAIL."""
    logger = get_app_logger()
    settings = build_settings()
    repository = build_finance_repository()

    account_id = ResolveAccountUseCase(
        repository,
        demo_account_id=settings.demo_account_id,
        logger=logger,
    ).execute(os.getenv("DASHBOARD_EMAIL"))
    get_usage_logger().info(f"dashboard_cli account={account_id}")

    view = GetDashboardUseCase(repository, logger=logger).execute(account_id)
    for line in render_dashboard(view, settings.display_currency, logger):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
