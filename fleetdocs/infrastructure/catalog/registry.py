"""Immutable document type registry (implements IDocumentTypeCatalog)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from fleetdocs.application.dtos.catalog import CatalogGroup, DocumentTypeOption
from fleetdocs.domain.entities.document_type import DocumentTypeDefinition
from fleetdocs.domain.enums import RequirementBucket
from fleetdocs.domain.exceptions import CatalogConfigurationException

# Display label and description per bucket (declaration order = display order).
BUCKET_LABELS: dict[RequirementBucket, tuple[str, str]] = {
    RequirementBucket.REQUIRED: (
        "Required",
        "Documents required for every entity of this kind",
    ),
    RequirementBucket.CONDITIONAL: (
        "Conditional",
        "Required depending on the type of transport",
    ),
    RequirementBucket.RECOMMENDED: (
        "Recommended",
        "Not legally required, but recommended",
    ),
}


class DocumentTypeCatalog:
    """Ordered, read-only registry of document type definitions.

    Declaration order is preserved and significant: it is the tie-break
    order of the missing-document report and the order of select options.
    Built once; exposes no mutators.
    """

    __slots__ = ("_name", "_entries", "_items", "_required_keys")

    def __init__(self, name: str, definitions: Iterable[DocumentTypeDefinition]) -> None:
        entries: dict[str, DocumentTypeDefinition] = {}
        duplicates: list[str] = []
        for definition in definitions:
            if definition.key in entries:
                duplicates.append(definition.key)
                continue
            entries[definition.key] = definition
        if duplicates:
            raise CatalogConfigurationException(
                name,
                [f"Duplicate document type key: {key}" for key in duplicates],
            )
        self._name = name
        self._entries = MappingProxyType(entries)
        self._items = tuple(entries.items())
        self._required_keys = frozenset(
            key for key, definition in self._items if definition.required
        )

    @property
    def name(self) -> str:
        return self._name

    def lookup(self, key: str) -> DocumentTypeDefinition | None:
        """Return the definition for key, or None when the key is unknown."""
        return self._entries.get(key)

    def list(self) -> tuple[tuple[str, DocumentTypeDefinition], ...]:
        """Return (key, definition) pairs in declaration order."""
        return self._items

    def group_by_category(self) -> dict[RequirementBucket, CatalogGroup]:
        """Return entries grouped by requirement bucket.

        An entry goes to required if required, else conditional if
        conditionally required, else recommended. Every bucket is present,
        possibly empty.
        """
        grouped: dict[RequirementBucket, list[DocumentTypeDefinition]] = {
            bucket: [] for bucket in BUCKET_LABELS
        }
        for _, definition in self._items:
            grouped[definition.bucket].append(definition)
        return {
            bucket: CatalogGroup(
                label=BUCKET_LABELS[bucket][0],
                description=BUCKET_LABELS[bucket][1],
                types=tuple(types),
            )
            for bucket, types in grouped.items()
        }

    def select_options(self) -> tuple[DocumentTypeOption, ...]:
        """Return the flat select-widget projection in declaration order."""
        return tuple(
            DocumentTypeOption(
                key=key,
                label=definition.name,
                category=definition.category,
                icon=definition.icon,
                expires=definition.expires,
                alert_days_before=definition.alert_days_before,
            )
            for key, definition in self._items
        )

    def required_keys(self) -> frozenset[str]:
        """Return keys of unconditionally required types."""
        return self._required_keys

    def merged_with(self, other: DocumentTypeCatalog, name: str | None = None) -> DocumentTypeCatalog:
        """Return a new catalog with this catalog's entries followed by other's."""
        return DocumentTypeCatalog(
            name or f"{self._name}+{other.name}",
            [definition for _, definition in (*self._items, *other.list())],
        )

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"DocumentTypeCatalog(name={self._name!r}, types={len(self._items)})"
