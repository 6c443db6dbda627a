"""Domain entities."""

from fleetdocs.domain.entities.document import DocumentInstance
from fleetdocs.domain.entities.document_type import DocumentTypeDefinition

__all__ = ["DocumentInstance", "DocumentTypeDefinition"]
