"""Catalog interface (port) for the application layer.

Services and use cases depend on this protocol; the infrastructure
registry implements it (DIP).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol

from fleetdocs.domain.entities.document_type import DocumentTypeDefinition

if TYPE_CHECKING:
    from fleetdocs.application.dtos.catalog import CatalogGroup, DocumentTypeOption
    from fleetdocs.domain.enums import RequirementBucket


class IDocumentTypeCatalog(Protocol):
    """Protocol for an immutable document type registry."""

    name: str

    def lookup(self, key: str) -> DocumentTypeDefinition | None:
        """Return the definition for key, or None when the key is unknown."""

    def list(self) -> tuple[tuple[str, DocumentTypeDefinition], ...]:
        """Return (key, definition) pairs in declaration order."""

    def group_by_category(self) -> dict[RequirementBucket, CatalogGroup]:
        """Return entries bucketed as required / conditional / recommended."""

    def select_options(self) -> tuple[DocumentTypeOption, ...]:
        """Return the flat select-widget projection in declaration order."""

    def required_keys(self) -> frozenset[str]:
        """Return keys of unconditionally required types."""

    def __contains__(self, key: object) -> bool: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[str]: ...
