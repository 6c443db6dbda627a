"""Severity classification and alert gating for document expiry.

Two independent rules over the same inputs:

- classify(): visual severity tier (badge color, priority) from fixed
  global thresholds. Ignores the per-type alert_days_before.
- needs_alert(): whether a document belongs in the alert feed, using the
  per-type alert_days_before threshold.

They answer different questions (display vs. notification) and are kept
separate on purpose.
"""

from __future__ import annotations

from fleetdocs.application.dtos.compliance import AlertRecord
from fleetdocs.core.constants import (
    CRITICAL_MAX_DAYS,
    MISSING_DAYS_SORT_VALUE,
    URGENT_MAX_DAYS,
    WARNING_MAX_DAYS,
)
from fleetdocs.domain.entities.document_type import DocumentTypeDefinition
from fleetdocs.domain.enums import AlertColor, AlertStatusCode
from fleetdocs.domain.value_objects.core import AlertStatus

NO_EXPIRY = AlertStatus(AlertColor.GRAY, AlertStatusCode.NO_EXPIRY, "No expiry", 0)
REVIEW_RECOMMENDED = AlertStatus(
    AlertColor.BLUE, AlertStatusCode.REVIEW_RECOMMENDED, "Review recommended", 1
)
UNKNOWN = AlertStatus(AlertColor.GRAY, AlertStatusCode.UNKNOWN, "Unknown date", 0)
EXPIRED = AlertStatus(
    AlertColor.RED, AlertStatusCode.EXPIRED, "EXPIRED", 5, urgent=True
)
CRITICAL = AlertStatus(
    AlertColor.RED, AlertStatusCode.CRITICAL, "Critical", 4, urgent=True
)
URGENT = AlertStatus(AlertColor.ORANGE, AlertStatusCode.URGENT, "Urgent", 3)
WARNING = AlertStatus(AlertColor.YELLOW, AlertStatusCode.WARNING, "Warning", 2)
OK = AlertStatus(AlertColor.GREEN, AlertStatusCode.OK, "OK", 0)


class AlertClassifier:
    """Maps a day count and a type definition to a tier and an alert decision."""

    @staticmethod
    def classify(
        days_until_expiry: int | None,
        type_def: DocumentTypeDefinition,
    ) -> AlertStatus:
        """Return the visual severity tier; first matching rule wins.

        Order matters for the special cases: non-expiring types, then
        periodic-review types without a date, then unknown dates, then the
        fixed 7 / 30 / 90 day tiers.
        """
        if not type_def.tracks_expiry:
            return NO_EXPIRY
        if type_def.periodic_review and days_until_expiry is None:
            return REVIEW_RECOMMENDED
        if days_until_expiry is None:
            return UNKNOWN
        if days_until_expiry < 0:
            return EXPIRED
        if days_until_expiry <= CRITICAL_MAX_DAYS:
            return CRITICAL
        if days_until_expiry <= URGENT_MAX_DAYS:
            return URGENT
        if days_until_expiry <= WARNING_MAX_DAYS:
            return WARNING
        return OK

    @staticmethod
    def needs_alert(
        type_def: DocumentTypeDefinition,
        days_until_expiry: int | None,
    ) -> bool:
        """Return whether the document should be in the alert feed.

        True inside the type's alert_days_before window or once expired;
        never for an unknown day count.
        """
        if days_until_expiry is None:
            return False
        if (
            type_def.alert_days_before is not None
            and days_until_expiry <= type_def.alert_days_before
        ):
            return True
        return days_until_expiry < 0


def alert_sort_key(record: AlertRecord) -> tuple[int, int]:
    """Total-order key: highest priority first, then soonest expiry.

    Records without a day count sort after every dated record of the same
    priority.
    """
    days = (
        record.days_until_expiry
        if record.days_until_expiry is not None
        else MISSING_DAYS_SORT_VALUE
    )
    return (-record.priority, days)
