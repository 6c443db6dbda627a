"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from fleetdocs.domain.entities import DocumentInstance, DocumentTypeDefinition
from fleetdocs.domain.enums import (
    AlertColor,
    AlertStatusCode,
    EntityKind,
    MissingPriority,
    RequiredCondition,
    RequirementBucket,
)
from fleetdocs.domain.exceptions import (
    CatalogConfigurationException,
    FleetDocsException,
    ValidationException,
)
from fleetdocs.domain.value_objects import AlertStatus, EntityProfile

__all__ = [
    # Entities
    "DocumentInstance",
    "DocumentTypeDefinition",
    # Enums
    "AlertColor",
    "AlertStatusCode",
    "EntityKind",
    "MissingPriority",
    "RequiredCondition",
    "RequirementBucket",
    # Exceptions
    "CatalogConfigurationException",
    "FleetDocsException",
    "ValidationException",
    # Value objects
    "AlertStatus",
    "EntityProfile",
]
