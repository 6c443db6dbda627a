"""Input schemas: document rows and entity profiles from the persistence layer."""

from datetime import date, datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from fleetdocs.domain.entities.document import DocumentInstance
from fleetdocs.domain.value_objects.core import EntityProfile


class DocumentRecordIn(BaseModel):
    """Document row as stored by the persistence layer (driver or vehicle)."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    owner_id: str = Field(
        default="",
        validation_alias=AliasChoices(
            "owner_id", "ownerId", "driver_id", "vehicle_id"
        ),
    )
    doc_type: str = Field(validation_alias=AliasChoices("doc_type", "docType"))
    doc_number: str | None = Field(
        default=None, validation_alias=AliasChoices("doc_number", "docNumber")
    )
    # Strings pass through untouched; the expiry calculator owns parsing
    # (offsets, unparseable values) so every input path counts days alike.
    expiry_date: str | datetime | date | None = Field(
        default=None,
        union_mode="left_to_right",
        validation_alias=AliasChoices("expiry_date", "expiryDate"),
    )

    def to_domain(self) -> DocumentInstance:
        """Convert to the domain snapshot consumed by the compliance engine."""
        return DocumentInstance(
            id=self.id,
            owner_id=self.owner_id,
            doc_type=self.doc_type,
            doc_number=self.doc_number,
            expiry_date=self.expiry_date,
        )


class EntityProfileIn(BaseModel):
    """Capability flags of a driver or vehicle; missing flags default to False."""

    model_config = ConfigDict(populate_by_name=True)

    has_international_routes: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "has_international_routes", "hasInternationalRoutes", "hasInternational"
        ),
    )
    has_adr: bool = Field(
        default=False, validation_alias=AliasChoices("has_adr", "hasADR", "hasAdr")
    )
    has_frigo: bool = Field(
        default=False, validation_alias=AliasChoices("has_frigo", "hasFrigo")
    )

    def to_domain(self) -> EntityProfile:
        """Convert to the domain value object."""
        return EntityProfile(
            has_international_routes=self.has_international_routes,
            has_adr=self.has_adr,
            has_frigo=self.has_frigo,
        )
