"""
Utility helper functions for dates and safe text handling.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Optional


def safe_str(value: Any, default: str = "") -> str:
    """
    Safely convert value to string, handling None.

    Args:
        value: Any value to convert
        default: Default string if value is None

    Returns:
        String representation or default
    """
    if value is None:
        return default
    return str(value)


def join_names(names: Iterable[Any], separator: str = " & ", default: str = "Unknown") -> str:
    """Join display names, falling back to a default when there are none."""
    names = [safe_str(n) for n in names]
    if not names:
        return default
    return separator.join(names)


def date_at_offset(offset_hours: int, now: Optional[datetime] = None) -> str:
    """
    Today's date as YYYYMMDD at a fixed UTC offset, ignoring host timezone.

    Args:
        offset_hours: Hours east of UTC (7 for GMT+7)
        now: Reference instant; naive values are taken as UTC. Defaults to now.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    local = now.astimezone(timezone(timedelta(hours=offset_hours)))
    return local.strftime("%Y%m%d")
