"""Built-in catalogs per entity kind, loaded once per process."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fleetdocs.core.config import get_settings
from fleetdocs.domain.enums import EntityKind
from fleetdocs.domain.exceptions import ValidationException
from fleetdocs.infrastructure.catalog.loader import load_catalog
from fleetdocs.infrastructure.catalog.registry import DocumentTypeCatalog
from fleetdocs.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

BUNDLED_CATALOG_DIR = Path(__file__).parent / "data"

# Catalog files composing each entity kind, in declaration order.
CATALOG_FILES: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.DRIVER: ("driver.json",),
    EntityKind.TRUCK: ("truck.json", "international.json"),
    EntityKind.TRAILER: ("trailer.json",),
}


def catalog_dir() -> Path:
    """Directory catalogs are read from (CATALOG_DIR or the bundled data)."""
    configured = get_settings().catalog_dir
    return Path(configured) if configured else BUNDLED_CATALOG_DIR


@lru_cache
def get_catalog(kind: EntityKind) -> DocumentTypeCatalog:
    """Return the process-wide catalog for an entity kind.

    Loaded and validated on first call, then served from cache. Trucks
    carry the international document types (TIR carnet, CEMT, vignettes,
    green card) after their own.

    Args:
        kind: Entity kind (driver, truck, trailer).

    Returns:
        Immutable DocumentTypeCatalog.

    Raises:
        ValidationException: If kind is not a known entity kind.
    """
    try:
        kind = EntityKind(kind)
    except ValueError as e:
        raise ValidationException(
            f"Unknown entity kind {kind!r} (expected one of "
            f"{', '.join(EntityKind.values())})",
            field="kind",
        ) from e
    base = catalog_dir()
    files = CATALOG_FILES[kind]
    catalog = load_catalog(base / files[0])
    for filename in files[1:]:
        catalog = catalog.merged_with(load_catalog(base / filename), name=kind.value)
    logger.info("Document type catalog %s ready (%d types)", kind.value, len(catalog))
    return catalog
