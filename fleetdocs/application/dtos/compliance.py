"""DTOs for compliance computation (alerts, missing documents, report)."""

from dataclasses import dataclass, field
from datetime import date, datetime

from fleetdocs.domain.entities.document import DocumentInstance
from fleetdocs.domain.entities.document_type import DocumentTypeDefinition
from fleetdocs.domain.enums import (
    AlertColor,
    AlertStatusCode,
    MissingPriority,
    RequiredCondition,
)
from fleetdocs.domain.value_objects.core import AlertStatus


@dataclass(frozen=True)
class AlertRecord:
    """One document instance that warrants attention (expiring, expired, review due)."""

    document_id: str
    doc_type: str
    name: str
    expiry_date: date | datetime | str | None
    days_until_expiry: int | None
    color: AlertColor
    status: AlertStatusCode
    label: str
    priority: int
    urgent: bool = False


@dataclass(frozen=True)
class MissingItem:
    """A catalog document type the entity does not have on file."""

    doc_type: str
    name: str
    description: str
    required: bool
    priority: MissingPriority
    conditional_required: bool = False
    required_condition: RequiredCondition | None = None
    recommended: bool = False


@dataclass(frozen=True)
class TypeStatus:
    """Per-type entry of a report: the document, its definition, and its tier."""

    document: DocumentInstance
    config: DocumentTypeDefinition
    days_until_expiry: int | None
    alert_status: AlertStatus


@dataclass(frozen=True)
class ComplianceReport:
    """Aggregate document compliance of one driver or vehicle."""

    total: int
    valid: int
    expiring: int
    expired: int
    missing: list[MissingItem] = field(default_factory=list)
    alerts: list[AlertRecord] = field(default_factory=list)  # most urgent first
    by_type: dict[str, TypeStatus] = field(default_factory=dict)
    compliance_percent: int = 100
