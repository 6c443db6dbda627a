"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from fleetdocs.shared.utils import to_calendar_date, today_in, utc_now

__all__ = ["to_calendar_date", "today_in", "utc_now"]
