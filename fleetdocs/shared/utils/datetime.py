"""
Calendar-day utilities for expiry arithmetic.

Expiry dates are compared as local calendar days, discarding
time-of-day. Use these helpers instead of date.today() so that "today"
follows the configured timezone rather than the host's.
"""

from datetime import UTC, date, datetime, tzinfo


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def today_in(tz: tzinfo) -> date:
    """
    Return the current calendar day in the given timezone.

    Args:
        tz: Timezone whose local day is wanted (e.g. ZoneInfo("Europe/Bucharest"))

    Returns:
        Local date for "now" in tz
    """
    return utc_now().astimezone(tz).date()


def to_calendar_date(value: date | datetime | str | None, tz: tzinfo) -> date | None:
    """
    Normalize a date-like value to a local calendar day.

    - None or empty string: returns None
    - date: returned as-is
    - naive datetime: taken as local time, time-of-day dropped
    - aware datetime: converted to tz, then time-of-day dropped
    - str: ISO-8601 date ('2025-03-01') or datetime ('2025-03-01T10:00:00Z')
    - anything unparseable: returns None

    Args:
        value: Date-like value as stored by the persistence layer
        tz: Timezone defining the local calendar day

    Returns:
        Local calendar date or None
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(tz).date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return to_calendar_date(datetime.fromisoformat(text), tz)
        except ValueError:
            return None

    return None
