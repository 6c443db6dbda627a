"""Application interfaces (protocols). Implementations live in infrastructure."""

from fleetdocs.application.interfaces.catalog import IDocumentTypeCatalog

__all__ = ["IDocumentTypeCatalog"]
