"""Domain services for affiliate program rollups."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import (
    AffiliateProgram,
    AffiliateProgramStats,
    AffiliateRollup,
)
from src.utils.decimal_utils import HUNDRED, ZERO


def conversion_rate(conversions: int, clicks: int) -> Decimal:
    """Return conversions as a percentage of clicks, 0 without clicks."""
    if clicks == 0:
        return Decimal("0.00")
    return Decimal(conversions) / Decimal(clicks) * HUNDRED


def earnings_per_click(commissions: Decimal, clicks: int) -> Decimal:
    """Return commissions divided by clicks, 0 without clicks."""
    if clicks == 0:
        return Decimal("0.00")
    return commissions / Decimal(clicks)


def compute_affiliate_rollup(
    programs: Iterable[AffiliateProgram],
) -> AffiliateRollup:
    """Aggregate clicks, conversions and commissions across programs.

    Args:
        programs: Affiliate programs of a single account.

    Returns:
        AffiliateRollup: Totals, rates, per-program stats and the program
        with the highest commissions.
    """
    programs = list(programs)
    total_clicks = sum(program.clicks for program in programs)
    total_conversions = sum(program.conversions for program in programs)
    total_commissions = sum(
        (program.commissions for program in programs),
        ZERO,
    )
    stats = [
        AffiliateProgramStats(
            program=program,
            conversion_rate=conversion_rate(
                program.conversions, program.clicks
            ),
            epc=earnings_per_click(program.commissions, program.clicks),
        )
        for program in programs
    ]
    by_commissions = sorted(
        programs,
        key=lambda program: program.commissions,
        reverse=True,
    )
    return AffiliateRollup(
        total_clicks=total_clicks,
        total_conversions=total_conversions,
        total_commissions=total_commissions,
        avg_conversion_rate=conversion_rate(total_conversions, total_clicks),
        epc=earnings_per_click(total_commissions, total_clicks),
        programs=stats,
        top_program=by_commissions[0] if by_commissions else None,
    )


__all__ = [
    "conversion_rate",
    "earnings_per_click",
    "compute_affiliate_rollup",
]
