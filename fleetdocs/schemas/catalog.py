"""Catalog API schemas: select options, grouped types, full definitions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from fleetdocs.application.interfaces.catalog import IDocumentTypeCatalog
from fleetdocs.domain.entities.document_type import DocumentTypeDefinition
from fleetdocs.domain.enums import RequiredCondition, RequirementBucket

_CAMEL = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


class DocumentTypeOptionResponse(BaseModel):
    """One option of a document type selection widget."""

    model_config = _CAMEL

    key: str
    label: str
    category: str
    icon: str | None = None
    expires: bool
    alert_days_before: int | None = None


class DocumentTypeResponse(BaseModel):
    """Full document type definition."""

    model_config = _CAMEL

    key: str
    name: str
    category: str
    description: str = ""
    icon: str | None = None
    required: bool = False
    conditional_required: bool = False
    required_condition: RequiredCondition | None = None
    recommended: bool = False
    expires: bool = False
    default_validity_months: int | None = None
    alert_days_before: int | None = None
    periodic_review: bool = False
    review_interval_months: int | None = None
    one_time: bool = False

    @classmethod
    def from_definition(cls, definition: DocumentTypeDefinition) -> DocumentTypeResponse:
        return cls.model_validate(definition)


class CatalogGroupResponse(BaseModel):
    """Catalog entries of one requirement bucket."""

    model_config = _CAMEL

    label: str
    description: str
    types: list[DocumentTypeResponse]


def select_options_response(
    catalog: IDocumentTypeCatalog,
) -> list[DocumentTypeOptionResponse]:
    """Flat projection of catalog for selection widgets, declaration order kept."""
    return [
        DocumentTypeOptionResponse.model_validate(option)
        for option in catalog.select_options()
    ]


def grouped_types_response(
    catalog: IDocumentTypeCatalog,
) -> dict[RequirementBucket, CatalogGroupResponse]:
    """Catalog grouped by requirement bucket for display."""
    return {
        bucket: CatalogGroupResponse(
            label=group.label,
            description=group.description,
            types=[DocumentTypeResponse.from_definition(t) for t in group.types],
        )
        for bucket, group in catalog.group_by_category().items()
    }
