"""Fixed-rate currency conversion applied to engine output for display."""

from decimal import Decimal
from logging import Logger

BASE_CURRENCY = "USD"

EXCHANGE_RATES = {
    "USD": Decimal("1"),
    "EUR": Decimal("0.92"),
}

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
}


def convert_amount(
    amount: Decimal,
    target_currency: str,
    logger: Logger,
) -> Decimal:
    """Convert a base-currency amount into the target currency.

    Args:
        amount: Amount expressed in USD.
        target_currency: Currency code to display.
        logger: Logger used for warnings.

    Returns:
        Decimal: Converted amount, or the unchanged amount when the currency
        has no configured rate.
    """
    rate = EXCHANGE_RATES.get(target_currency)
    if rate is None:
        logger.warning(
            f"Missing FX rate for {BASE_CURRENCY} to {target_currency}"
        )
        return amount
    return amount * rate


def format_money(amount: Decimal, currency_code: str) -> str:
    """Format an amount with its currency symbol and two decimals."""
    symbol = CURRENCY_SYMBOLS.get(currency_code, f"{currency_code} ")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


__all__ = [
    "BASE_CURRENCY",
    "EXCHANGE_RATES",
    "CURRENCY_SYMBOLS",
    "convert_amount",
    "format_money",
]
