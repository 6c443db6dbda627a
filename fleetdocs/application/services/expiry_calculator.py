"""Days-until-expiry computation on local calendar days."""

from __future__ import annotations

from datetime import date, datetime, tzinfo

from fleetdocs.core.config import get_settings
from fleetdocs.shared.utils.datetime import to_calendar_date, today_in


class ExpiryCalculator:
    """Turns an expiry date (or its absence) into a whole-day count.

    Both the expiry date and "today" are normalized to midnight of their
    local calendar day, so an expiry of today yields 0 and yesterday -1.
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz or get_settings().tzinfo

    def today(self) -> date:
        """Current calendar day in the configured timezone."""
        return today_in(self.tz)

    def days_until(
        self,
        expiry_date: date | datetime | str | None,
        today: date | None = None,
    ) -> int | None:
        """Return days from today until expiry_date, or None.

        Args:
            expiry_date: Date, datetime, ISO-8601 string, or None.
            today: Reference day; defaults to the current local day.

        Returns:
            Negative when already expired, 0 on the expiry day, None when
            the date is missing or unparseable.
        """
        expiry = to_calendar_date(expiry_date, self.tz)
        if expiry is None:
            return None
        reference = today if today is not None else self.today()
        if isinstance(reference, datetime):
            reference = to_calendar_date(reference, self.tz)
        return (expiry - reference).days
