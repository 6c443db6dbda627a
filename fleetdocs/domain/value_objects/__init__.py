"""Domain value objects (immutable, no identity)."""

from fleetdocs.domain.value_objects.core import AlertStatus, EntityProfile

__all__ = ["AlertStatus", "EntityProfile"]
