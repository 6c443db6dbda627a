"""Tests for ExpiryCalculator (calendar-day arithmetic, parsing tolerance)."""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from fleetdocs.application.services.expiry_calculator import ExpiryCalculator

TODAY = date(2025, 6, 1)


@pytest.fixture
def calc() -> ExpiryCalculator:
    return ExpiryCalculator(ZoneInfo("UTC"))


class TestDaysUntil:
    """days_until: whole days from today to the expiry day."""

    def test_expiry_today_is_zero(self, calc: ExpiryCalculator) -> None:
        assert calc.days_until(TODAY, today=TODAY) == 0

    def test_expiry_yesterday_is_minus_one(self, calc: ExpiryCalculator) -> None:
        assert calc.days_until(TODAY - timedelta(days=1), today=TODAY) == -1

    def test_future_expiry(self, calc: ExpiryCalculator) -> None:
        assert calc.days_until(date(2025, 6, 6), today=TODAY) == 5

    def test_crosses_year_boundary(self, calc: ExpiryCalculator) -> None:
        assert calc.days_until(date(2026, 1, 1), today=date(2025, 12, 31)) == 1

    def test_time_of_day_is_discarded(self, calc: ExpiryCalculator) -> None:
        """A late-evening expiry on a given day still counts as that day."""
        assert calc.days_until(datetime(2025, 6, 2, 23, 59), today=TODAY) == 1
        assert calc.days_until(datetime(2025, 6, 2, 0, 1), today=TODAY) == 1

    def test_reference_datetime_is_normalized(self, calc: ExpiryCalculator) -> None:
        now = datetime(2025, 6, 1, 18, 30, tzinfo=timezone.utc)
        assert calc.days_until(date(2025, 6, 2), today=now) == 1


class TestParsing:
    """Missing or unparseable dates give None instead of raising."""

    @pytest.mark.parametrize("value", [None, "", "   ", "not-a-date", "2025-13-45", 12345])
    def test_unparseable_returns_none(self, calc: ExpiryCalculator, value) -> None:
        assert calc.days_until(value, today=TODAY) is None

    def test_iso_date_string(self, calc: ExpiryCalculator) -> None:
        assert calc.days_until("2025-06-11", today=TODAY) == 10

    def test_iso_datetime_string_with_z(self, calc: ExpiryCalculator) -> None:
        assert calc.days_until("2025-06-11T08:00:00Z", today=TODAY) == 10

    def test_aware_datetime_uses_configured_timezone(self) -> None:
        """23:30 UTC on May 31 is already June 1 in Bucharest (UTC+3 in summer)."""
        calc = ExpiryCalculator(ZoneInfo("Europe/Bucharest"))
        expiry = datetime(2025, 5, 31, 23, 30, tzinfo=timezone.utc)
        assert calc.days_until(expiry, today=TODAY) == 0


class TestToday:
    def test_today_is_a_date(self, calc: ExpiryCalculator) -> None:
        today = calc.today()
        assert isinstance(today, date)
        assert not isinstance(today, datetime)

    def test_default_today_used_when_omitted(self, calc: ExpiryCalculator) -> None:
        assert calc.days_until(calc.today()) == 0
