"""Missing-document resolution against a catalog and an entity profile."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from fleetdocs.application.dtos.compliance import MissingItem
from fleetdocs.application.interfaces.catalog import IDocumentTypeCatalog
from fleetdocs.domain.entities.document_type import DocumentTypeDefinition
from fleetdocs.domain.enums import MissingPriority, RequiredCondition
from fleetdocs.domain.value_objects.core import EntityProfile

# One accessor per condition; keep in sync with RequiredCondition.
CONDITION_FLAGS: dict[RequiredCondition, Callable[[EntityProfile], bool]] = {
    RequiredCondition.INTERNATIONAL: lambda p: p.has_international_routes,
    RequiredCondition.ADR: lambda p: p.has_adr,
    RequiredCondition.FRIGO: lambda p: p.has_frigo,
}


def profile_satisfies(
    condition: RequiredCondition | None,
    profile: EntityProfile,
) -> bool:
    """Return whether profile has the capability flag behind condition.

    Unmapped or absent conditions resolve to False.
    """
    accessor = CONDITION_FLAGS.get(condition) if condition is not None else None
    if accessor is None:
        return False
    return bool(accessor(profile))


def missing_sort_key(item: MissingItem) -> int:
    """Sort key by priority rank (high, medium, low).

    Used with a stable sort, so equal ranks keep catalog declaration order.
    """
    return item.priority.rank


class RequirementResolver:
    """Determines which catalog entries an entity is still missing."""

    def __init__(self, catalog: IDocumentTypeCatalog) -> None:
        self.catalog = catalog

    @staticmethod
    def is_required(type_def: DocumentTypeDefinition, profile: EntityProfile) -> bool:
        """Return whether type_def is mandatory for an entity with profile.

        Conditional entries override the unconditional flag with the
        profile capability they depend on.
        """
        if type_def.conditional_required and type_def.required_condition is not None:
            return profile_satisfies(type_def.required_condition, profile)
        return type_def.required

    def resolve_missing(
        self,
        existing_doc_types: Iterable[str],
        profile: EntityProfile | None = None,
    ) -> list[MissingItem]:
        """Return missing required / conditional / recommended entries.

        Args:
            existing_doc_types: Type keys the entity already has on file.
            profile: Capability flags; defaults to no capabilities.

        Returns:
            Items sorted high → medium → low, catalog order within a rank.
            Entries that are neither applicable nor recommended are omitted.
        """
        profile = profile or EntityProfile()
        existing = set(existing_doc_types)
        missing: list[MissingItem] = []
        for key, type_def in self.catalog.list():
            if key in existing:
                continue
            if self.is_required(type_def, profile):
                missing.append(
                    MissingItem(
                        doc_type=key,
                        name=type_def.name,
                        description=type_def.description,
                        required=True,
                        conditional_required=type_def.conditional_required,
                        required_condition=type_def.required_condition,
                        priority=(
                            MissingPriority.MEDIUM
                            if type_def.conditional_required
                            else MissingPriority.HIGH
                        ),
                    )
                )
            elif type_def.recommended:
                missing.append(
                    MissingItem(
                        doc_type=key,
                        name=type_def.name,
                        description=type_def.description,
                        required=False,
                        recommended=True,
                        priority=MissingPriority.LOW,
                    )
                )
        return sorted(missing, key=missing_sort_key)
