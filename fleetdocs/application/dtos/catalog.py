"""DTOs for catalog projections (select options, grouped display)."""

from dataclasses import dataclass

from fleetdocs.domain.entities.document_type import DocumentTypeDefinition


@dataclass(frozen=True)
class DocumentTypeOption:
    """Flat projection of one catalog entry for selection widgets."""

    key: str
    label: str
    category: str
    icon: str | None
    expires: bool
    alert_days_before: int | None


@dataclass(frozen=True)
class CatalogGroup:
    """Catalog entries of one requirement bucket, in declaration order."""

    label: str
    description: str
    types: tuple[DocumentTypeDefinition, ...]
