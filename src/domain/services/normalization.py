"""Domain normalization helpers."""


def month_of(iso_date: str) -> str:
    """Return the YYYY-MM key of an ISO date string.

    Args:
        iso_date: Date formatted as YYYY-MM-DD.

    Returns:
        str: The first seven characters of the date.
    """
    return iso_date[:7]


def next_month(month: str) -> str:
    """Return the YYYY-MM key following the given month.

    Args:
        month: Month key formatted as YYYY-MM.

    Returns:
        str: The following month key, rolling over December.
    """
    year, month_number = (int(part) for part in month.split("-"))
    if month_number == 12:
        return f"{year + 1:04d}-01"
    return f"{year:04d}-{month_number + 1:02d}"


def normalize_record_type(value: str | None) -> str | None:
    """Normalize transaction or goal type labels.

    Args:
        value: Raw type value from a request or repository.

    Returns:
        str | None: Lower-cased type, or None when blank.
    """
    if not value:
        return None
    cleaned = value.strip()
    return cleaned.lower() if cleaned else None


def normalize_category(value: str | None) -> str:
    """Strip surrounding whitespace from a category label."""
    if not value:
        return ""
    return value.strip()


__all__ = [
    "month_of",
    "next_month",
    "normalize_record_type",
    "normalize_category",
]
