"""Document type catalogs: registry, JSON loader, built-in catalogs."""

from fleetdocs.infrastructure.catalog.factory import get_catalog
from fleetdocs.infrastructure.catalog.loader import build_catalog, load_catalog
from fleetdocs.infrastructure.catalog.registry import DocumentTypeCatalog

__all__ = ["DocumentTypeCatalog", "build_catalog", "get_catalog", "load_catalog"]
