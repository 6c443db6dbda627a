"""Pydantic schemas for the API/UI boundary (input rows, report and catalog output)."""

from fleetdocs.schemas.catalog import (
    CatalogGroupResponse,
    DocumentTypeOptionResponse,
    DocumentTypeResponse,
    grouped_types_response,
    select_options_response,
)
from fleetdocs.schemas.compliance import (
    AlertResponse,
    AlertStatusResponse,
    ComplianceReportResponse,
    DocumentResponse,
    MissingItemResponse,
    TypeStatusResponse,
    missing_items_response,
)
from fleetdocs.schemas.document import DocumentRecordIn, EntityProfileIn

__all__ = [
    "AlertResponse",
    "AlertStatusResponse",
    "CatalogGroupResponse",
    "ComplianceReportResponse",
    "DocumentRecordIn",
    "DocumentResponse",
    "DocumentTypeOptionResponse",
    "DocumentTypeResponse",
    "EntityProfileIn",
    "MissingItemResponse",
    "TypeStatusResponse",
    "grouped_types_response",
    "missing_items_response",
    "select_options_response",
]
