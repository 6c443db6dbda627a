"""Compliance report API schemas (camelCase JSON for the UI)."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fleetdocs.application.dtos.compliance import (
    AlertRecord,
    ComplianceReport,
    MissingItem,
    TypeStatus,
)
from fleetdocs.domain.enums import (
    AlertColor,
    AlertStatusCode,
    MissingPriority,
    RequiredCondition,
)
from fleetdocs.schemas.catalog import DocumentTypeResponse

_CAMEL = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


class AlertStatusResponse(BaseModel):
    """Visual severity tier."""

    model_config = _CAMEL

    color: AlertColor
    status: AlertStatusCode
    label: str
    priority: int = Field(..., ge=0, le=5)
    urgent: bool = False


class AlertResponse(BaseModel):
    """One entry of the alert feed."""

    model_config = _CAMEL

    document_id: str
    doc_type: str
    name: str
    expiry_date: str | datetime | date | None = Field(
        default=None, union_mode="left_to_right"
    )
    days_until_expiry: int | None
    color: AlertColor
    status: AlertStatusCode
    label: str
    priority: int = Field(..., ge=0, le=5)
    urgent: bool = False

    @classmethod
    def from_record(cls, record: AlertRecord) -> AlertResponse:
        return cls.model_validate(record)


class MissingItemResponse(BaseModel):
    """Missing catalog document type."""

    model_config = _CAMEL

    doc_type: str
    name: str
    description: str
    required: bool
    conditional_required: bool = False
    required_condition: RequiredCondition | None = None
    recommended: bool = False
    priority: MissingPriority


class DocumentResponse(BaseModel):
    """Document snapshot echoed in the per-type breakdown."""

    model_config = _CAMEL

    id: str
    owner_id: str
    doc_type: str
    doc_number: str | None = None
    expiry_date: str | datetime | date | None = Field(
        default=None, union_mode="left_to_right"
    )


class TypeStatusResponse(BaseModel):
    """Per-type breakdown entry."""

    model_config = _CAMEL

    document: DocumentResponse
    config: DocumentTypeResponse
    days_until_expiry: int | None
    alert_status: AlertStatusResponse

    @classmethod
    def from_status(cls, status: TypeStatus) -> TypeStatusResponse:
        return cls(
            document=DocumentResponse.model_validate(status.document),
            config=DocumentTypeResponse.from_definition(status.config),
            days_until_expiry=status.days_until_expiry,
            alert_status=AlertStatusResponse.model_validate(status.alert_status),
        )


class ComplianceReportResponse(BaseModel):
    """Compliance report for one driver or vehicle.

    Serialize with model_dump(by_alias=True) / model_dump_json(by_alias=True)
    to get camelCase keys (daysUntilExpiry, compliancePercent, ...).
    """

    model_config = _CAMEL

    total: int
    valid: int
    expiring: int
    expired: int
    missing: list[MissingItemResponse]
    alerts: list[AlertResponse]
    by_type: dict[str, TypeStatusResponse]
    compliance_percent: int = Field(..., ge=0, le=100)

    @classmethod
    def from_report(cls, report: ComplianceReport) -> ComplianceReportResponse:
        """Build the response from an engine report, preserving list order."""
        return cls(
            total=report.total,
            valid=report.valid,
            expiring=report.expiring,
            expired=report.expired,
            missing=[
                MissingItemResponse.model_validate(item) for item in report.missing
            ],
            alerts=[AlertResponse.from_record(alert) for alert in report.alerts],
            by_type={
                doc_type: TypeStatusResponse.from_status(status)
                for doc_type, status in report.by_type.items()
            },
            compliance_percent=report.compliance_percent,
        )


def missing_items_response(items: list[MissingItem]) -> list[MissingItemResponse]:
    """Serialize a standalone missing-documents list."""
    return [MissingItemResponse.model_validate(item) for item in items]
