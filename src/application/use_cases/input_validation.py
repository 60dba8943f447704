"""Shared input checks for the write use cases.

Every helper raises ValueError with a message safe to show to the caller.
"""

from datetime import date
from decimal import Decimal, InvalidOperation
import re

from src.domain.services.normalization import (
    normalize_category,
    normalize_record_type,
)
from src.utils.decimal_utils import coerce_decimal

_MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")
_YEAR_PATTERN = re.compile(r"^\d{4}$")


def require_choice(value: str | None, choices: tuple[str, ...], field: str) -> str:
    """Return the normalized value when it is one of the allowed choices.

    Args:
        value: Raw value supplied by the caller.
        choices: Allowed normalized values.
        field: Field name used in the error message.

    Returns:
        str: Normalized value.

    Raises:
        ValueError: If the value is missing or not allowed.
    """
    normalized = normalize_record_type(value)
    if normalized not in choices:
        raise ValueError(
            f"Invalid {field} '{value}'. Expected one of: {', '.join(choices)}"
        )
    return normalized


def require_amount(value, field: str, *, positive: bool = False) -> Decimal:
    """Return a non-negative (or strictly positive) Decimal amount."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{field} is required")
    try:
        amount = coerce_decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid {field} '{value}'") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid {field} '{value}'")
    if positive and amount <= 0:
        raise ValueError(f"{field} must be greater than zero")
    if amount < 0:
        raise ValueError(f"{field} must not be negative")
    return amount


def require_count(value, field: str) -> int:
    """Return a non-negative integer count."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field} must be an integer")
    if value < 0:
        raise ValueError(f"{field} must not be negative")
    return value


def require_iso_date(value: str | None) -> str:
    """Return the date when it is a valid YYYY-MM-DD string."""
    if not value:
        raise ValueError("date is required")
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError as exc:
        raise ValueError(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        ) from exc


def require_month(value: str | None) -> str:
    """Return the month when it is a valid YYYY-MM string."""
    if not value or not _MONTH_PATTERN.match(value):
        raise ValueError(f"Invalid month '{value}'. Expected format YYYY-MM.")
    return value


def require_year(value: str | None) -> str:
    """Return the year when it is a four-digit string."""
    if not value or not _YEAR_PATTERN.match(value):
        raise ValueError(f"Invalid year '{value}'. Expected format YYYY.")
    return value


def require_category(value: str | None) -> str:
    category = normalize_category(value)
    if not category:
        raise ValueError("category is required")
    return category


def require_name(value: str | None) -> str:
    name = (value or "").strip()
    if not name:
        raise ValueError("name is required")
    return name


def require_ids(ids) -> list[int]:
    """Return the ids as a non-empty list of integers."""
    if not isinstance(ids, (list, tuple)) or not ids:
        raise ValueError("Invalid or empty ids array")
    if any(isinstance(item, bool) or not isinstance(item, int) for item in ids):
        raise ValueError("ids must be integers")
    return list(ids)


__all__ = [
    "require_choice",
    "require_amount",
    "require_count",
    "require_iso_date",
    "require_month",
    "require_year",
    "require_category",
    "require_name",
    "require_ids",
]
