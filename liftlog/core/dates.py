"""Date helpers: ordinal formatting, date parameter parsing and local day bounds.

Day boundaries are local to an explicit zone, never the server's clock zone:
a workout logged at 23:59 belongs to that calendar day wherever the API runs.
"""

from __future__ import annotations

from datetime import date, datetime, time
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from liftlog.core.config import get_settings

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_END_OF_DAY = time(23, 59, 59, 999000)


class InvalidDateError(ValueError):
    """Raised for a date or time zone parameter that cannot be parsed."""


def get_ordinal_suffix(day: int) -> str:
    """Ordinal suffix for a day of month: 1 -> st, 2 -> nd, 11 -> th, 23 -> rd."""
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_date_with_ordinal(value: date) -> str:
    """Format as '6th Jan 2026'."""
    return f"{value.day}{get_ordinal_suffix(value.day)} {_MONTH_ABBR[value.month - 1]} {value.year:04d}"


def resolve_timezone(name: str | None = None) -> ZoneInfo:
    """Return the named IANA zone, or the configured default when name is empty."""
    key = name or get_settings().default_timezone
    try:
        return ZoneInfo(key)
    # A zone directory such as "America" surfaces as IsADirectoryError
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidDateError(f"Unknown time zone: {key!r}") from e


def today_in(tz: ZoneInfo) -> date:
    return datetime.now(tz).date()


def parse_selected_date(raw: str | None, tz: ZoneInfo) -> date:
    """Parse a YYYY-MM-DD query value. Missing or blank means today in tz.

    Anything else is rejected; there is no silent fallback to today.
    """
    if raw is None or not raw.strip():
        return today_in(tz)
    value = raw.strip()
    # strptime alone would accept '2026-1-6'
    if len(value) != 10 or value[4] != "-" or value[7] != "-":
        raise InvalidDateError(f"Invalid date {raw!r}; expected YYYY-MM-DD")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise InvalidDateError(f"Invalid date {raw!r}; expected YYYY-MM-DD") from e


def day_bounds(day: date, tz: ZoneInfo) -> tuple[datetime, datetime]:
    """Inclusive [00:00:00.000, 23:59:59.999] of day in tz, as aware datetimes."""
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day, _END_OF_DAY, tzinfo=tz)
    return start, end
