"""Application DTOs (frozen dataclasses, no presentation concerns)."""

from fleetdocs.application.dtos.catalog import CatalogGroup, DocumentTypeOption
from fleetdocs.application.dtos.compliance import (
    AlertRecord,
    ComplianceReport,
    MissingItem,
    TypeStatus,
)

__all__ = [
    "AlertRecord",
    "CatalogGroup",
    "ComplianceReport",
    "DocumentTypeOption",
    "MissingItem",
    "TypeStatus",
]
