"""Build compliance report use case: tiers, alerts, missing documents, score."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from datetime import date

from fleetdocs.application.dtos.compliance import (
    AlertRecord,
    ComplianceReport,
    TypeStatus,
)
from fleetdocs.application.interfaces.catalog import IDocumentTypeCatalog
from fleetdocs.application.services.alert_classifier import (
    AlertClassifier,
    alert_sort_key,
)
from fleetdocs.application.services.expiry_calculator import ExpiryCalculator
from fleetdocs.application.services.requirement_resolver import RequirementResolver
from fleetdocs.core.config import Settings, get_settings
from fleetdocs.domain.entities.document import DocumentInstance
from fleetdocs.domain.entities.document_type import DocumentTypeDefinition
from fleetdocs.domain.enums import AlertStatusCode
from fleetdocs.domain.value_objects.core import AlertStatus, EntityProfile
from fleetdocs.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def compute_compliance_percent(
    present_required: int,
    total_required: int,
    fallback: int,
) -> int:
    """Share of unconditionally required types on file, rounded half up.

    Args:
        present_required: Distinct required types the entity has.
        total_required: Required types defined by the catalog.
        fallback: Value returned when the catalog defines none.

    Returns:
        Integer percentage in 0..100.
    """
    if total_required <= 0:
        return fallback
    ratio = min(max(present_required, 0), total_required) / total_required
    return math.floor(100 * ratio + 0.5)


class ComplianceEngine:
    """Computes document compliance for one driver or vehicle.

    Stateless between calls: the catalog is read-only and each call
    returns a freshly built report.
    """

    def __init__(
        self,
        catalog: IDocumentTypeCatalog,
        settings: Settings | None = None,
        expiry_calculator: ExpiryCalculator | None = None,
    ) -> None:
        self._catalog = catalog
        self._settings = settings or get_settings()
        self._expiry = expiry_calculator or ExpiryCalculator(self._settings.tzinfo)
        self._classifier = AlertClassifier()
        self._resolver = RequirementResolver(catalog)

    @property
    def catalog(self) -> IDocumentTypeCatalog:
        return self._catalog

    def _known(
        self, documents: Iterable[DocumentInstance]
    ) -> Iterable[tuple[DocumentInstance, DocumentTypeDefinition]]:
        """Yield (document, definition), skipping types the catalog does not define."""
        for doc in documents:
            type_def = self._catalog.lookup(doc.doc_type)
            if type_def is None:
                logger.debug(
                    "Skipping document %s: unknown type %r in catalog %s",
                    doc.id,
                    doc.doc_type,
                    self._catalog.name,
                )
                continue
            yield doc, type_def

    @staticmethod
    def _alert_record(
        doc: DocumentInstance,
        type_def: DocumentTypeDefinition,
        days_until_expiry: int | None,
        alert_status: AlertStatus,
    ) -> AlertRecord:
        return AlertRecord(
            document_id=doc.id,
            doc_type=doc.doc_type,
            name=type_def.name,
            expiry_date=doc.expiry_date,
            days_until_expiry=days_until_expiry,
            color=alert_status.color,
            status=alert_status.status,
            label=alert_status.label,
            priority=alert_status.priority,
            urgent=alert_status.urgent,
        )

    def _should_alert(
        self,
        type_def: DocumentTypeDefinition,
        days_until_expiry: int | None,
        alert_status: AlertStatus,
    ) -> bool:
        return alert_status.priority > 0 or self._classifier.needs_alert(
            type_def, days_until_expiry
        )

    def _evaluate(
        self,
        documents: Iterable[DocumentInstance],
        today: date,
    ) -> Iterator[tuple[TypeStatus, AlertRecord | None]]:
        """Classify each known document once; shared by the report and the feed.

        Yields:
            (per-type status, alert record or None when it needs no alert)
        """
        for doc, type_def in self._known(documents):
            days = self._expiry.days_until(doc.expiry_date, today)
            alert_status = self._classifier.classify(days, type_def)
            alert = (
                self._alert_record(doc, type_def, days, alert_status)
                if self._should_alert(type_def, days, alert_status)
                else None
            )
            yield (
                TypeStatus(
                    document=doc,
                    config=type_def,
                    days_until_expiry=days,
                    alert_status=alert_status,
                ),
                alert,
            )

    def collect_alerts(
        self,
        documents: Sequence[DocumentInstance],
        today: date | None = None,
    ) -> list[AlertRecord]:
        """Return the alert feed for documents, most urgent first.

        Args:
            documents: Documents on file for one entity.
            today: Reference day; defaults to the current local day.

        Returns:
            Alert records for documents with a non-zero tier or inside
            their type's alert window.
        """
        today = today or self._expiry.today()
        alerts = [
            alert for _, alert in self._evaluate(documents, today) if alert is not None
        ]
        alerts.sort(key=alert_sort_key)
        return alerts

    def build_report(
        self,
        documents: Sequence[DocumentInstance],
        profile: EntityProfile | None = None,
        today: date | None = None,
    ) -> ComplianceReport:
        """Return the aggregate compliance report for one entity.

        Args:
            documents: Documents on file for the entity (any order).
            profile: Capability flags for conditional requirements.
            today: Reference day; defaults to the current local day.

        Returns:
            Report with tier counts, sorted alerts, sorted missing items,
            per-type status, and compliance percent.
        """
        profile = profile or EntityProfile()
        today = today or self._expiry.today()
        valid = expiring = expired = 0
        alerts: list[AlertRecord] = []
        by_type: dict[str, TypeStatus] = {}

        for type_status, alert in self._evaluate(documents, today):
            status = type_status.alert_status.status
            if status == AlertStatusCode.EXPIRED:
                expired += 1
            elif status in AlertStatusCode.expiring():
                expiring += 1
            else:
                valid += 1

            by_type[type_status.document.doc_type] = type_status
            if alert is not None:
                alerts.append(alert)

        present_types = {doc.doc_type for doc in documents}
        missing = self._resolver.resolve_missing(present_types, profile)
        alerts.sort(key=alert_sort_key)

        required_keys = self._catalog.required_keys()
        compliance_percent = compute_compliance_percent(
            len(required_keys & present_types),
            len(required_keys),
            self._settings.compliance_fallback_percent,
        )

        logger.debug(
            "Compliance report (%s): %d documents, %d alerts, %d missing, %d%%",
            self._catalog.name,
            len(documents),
            len(alerts),
            len(missing),
            compliance_percent,
        )
        return ComplianceReport(
            total=len(documents),
            valid=valid,
            expiring=expiring,
            expired=expired,
            missing=missing,
            alerts=alerts,
            by_type=by_type,
            compliance_percent=compliance_percent,
        )
