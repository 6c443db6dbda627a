"""Shared utilities: calendar-day helpers."""

from fleetdocs.shared.utils.datetime import to_calendar_date, today_in, utc_now

__all__ = ["to_calendar_date", "today_in", "utc_now"]
