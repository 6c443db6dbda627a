"""Domain exceptions for fleetdocs.

The compliance computation is total over its inputs and never raises;
these exceptions come from building type definitions and loading
catalogs, i.e. from configuration errors.
"""

from typing import Any


class FleetDocsException(Exception):
    """Root of the fleetdocs error hierarchy.

    Carries enough structure for a host application to turn it into an
    error response or a log record without parsing the message.

    Attributes:
        message: Readable description of what went wrong.
        error_code: Stable code for programmatic handling.
        details: Extra context such as the offending field or source file.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = details or {}
        super().__init__(message)


class ValidationException(FleetDocsException):
    """A document type definition (or other input) breaks a domain rule."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """
        Args:
            message: What rule was broken.
            field: Attribute that failed, when there is a single one.
        """
        super().__init__(
            message,
            "VALIDATION_ERROR",
            {"field": field} if field else {},
        )


class CatalogConfigurationException(FleetDocsException):
    """Catalog data cannot be turned into a valid registry."""

    def __init__(
        self,
        source: str,
        errors: list[Any],
        message: str | None = None,
    ) -> None:
        """
        Args:
            source: Catalog name or file path the data came from.
            errors: Individual problems (schema errors, duplicate keys, ...).
            message: Optional override of the default message.
        """
        super().__init__(
            message or f"Invalid document type catalog: {source}",
            "CATALOG_CONFIGURATION_ERROR",
            {"source": source, "errors": errors},
        )
