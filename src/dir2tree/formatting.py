"""Formatting helpers for per-file metadata shown in the tree."""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_size(num_bytes: int) -> str:
    """Format a byte count in human-readable binary units.

    The value is divided by 1024 until it drops below 1024 or the largest unit (TB) is
    reached, then rounded to one decimal place. A trailing ".0" is dropped.

    Args:
        num_bytes: Size in bytes.

    Returns:
        The formatted size, e.g. "1.5 KB".

    Example:
        >>> format_size(0)
        '0 B'
        >>> format_size(1536)
        '1.5 KB'
        >>> format_size(1048576)
        '1 MB'
    """
    if num_bytes == 0:
        return "0 B"

    value = float(num_bytes)
    unit_index = 0
    while value >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1

    # Decimal(value) is exact, so ties such as 1.25 round up rather than to even
    text = f"{Decimal(value).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP):f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text} {SIZE_UNITS[unit_index]}"


def format_date(modified_time: datetime) -> str:
    """Format a timestamp as its UTC calendar date (YYYY-MM-DD).

    Naive datetimes are assumed to already be in UTC.
    """
    if modified_time.tzinfo is not None:
        modified_time = modified_time.astimezone(timezone.utc)
    return modified_time.strftime("%Y-%m-%d")
