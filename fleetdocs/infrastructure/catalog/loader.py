"""Load document type catalogs from JSON data (validated with jsonschema).

Catalog files are configuration, not code:

    {
      "name": "driver",
      "types": [
        {"key": "carte_identitate", "name": "Carte de identitate",
         "category": "hr", "required": true, "expires": true,
         "alertDaysBefore": 90, ...},
        ...
      ]
    }

Field names are camelCase as delivered to the UI; declaration order of
"types" is preserved.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema

from fleetdocs.domain.entities.document_type import DocumentTypeDefinition
from fleetdocs.domain.enums import RequiredCondition
from fleetdocs.domain.exceptions import CatalogConfigurationException, ValidationException
from fleetdocs.infrastructure.catalog.registry import DocumentTypeCatalog

logger = logging.getLogger(__name__)

_NULLABLE_INT = {"type": ["integer", "null"], "minimum": 0}

DOCUMENT_TYPE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["key", "name", "category"],
    "additionalProperties": False,
    "properties": {
        "key": {"type": "string", "pattern": "^[a-z0-9_]+$"},
        "name": {"type": "string", "minLength": 1},
        "category": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "icon": {"type": ["string", "null"]},
        "required": {"type": "boolean"},
        "conditionalRequired": {"type": "boolean"},
        "requiredCondition": {
            "enum": [*RequiredCondition.values(), None],
        },
        "recommended": {"type": "boolean"},
        "expires": {"type": "boolean"},
        "defaultValidityMonths": _NULLABLE_INT,
        "alertDaysBefore": _NULLABLE_INT,
        "periodicReview": {"type": "boolean"},
        "reviewIntervalMonths": _NULLABLE_INT,
        "oneTime": {"type": "boolean"},
        "perUse": {"type": "boolean"},
        "perTrip": {"type": "boolean"},
    },
}

CATALOG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["name", "types"],
    "additionalProperties": False,
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "types": {"type": "array", "items": DOCUMENT_TYPE_SCHEMA},
    },
}

# camelCase JSON field -> DocumentTypeDefinition attribute
_FIELD_MAP = {
    "key": "key",
    "name": "name",
    "category": "category",
    "description": "description",
    "icon": "icon",
    "required": "required",
    "conditionalRequired": "conditional_required",
    "requiredCondition": "required_condition",
    "recommended": "recommended",
    "expires": "expires",
    "defaultValidityMonths": "default_validity_months",
    "alertDaysBefore": "alert_days_before",
    "periodicReview": "periodic_review",
    "reviewIntervalMonths": "review_interval_months",
    "oneTime": "one_time",
    "perUse": "per_use",
    "perTrip": "per_trip",
}


def _to_definition(entry: dict[str, Any]) -> DocumentTypeDefinition:
    kwargs = {_FIELD_MAP[field]: value for field, value in entry.items()}
    return DocumentTypeDefinition(**kwargs)


def build_catalog(data: dict[str, Any], source: str = "<memory>") -> DocumentTypeCatalog:
    """Validate catalog data and build an immutable registry.

    Args:
        data: Parsed catalog document ({"name": ..., "types": [...]}).
        source: Label for error messages (file path or catalog name).

    Returns:
        DocumentTypeCatalog in the declaration order of data["types"].

    Raises:
        CatalogConfigurationException: If data violates the catalog schema,
            a definition breaks a domain rule, or keys are duplicated.
    """
    validator = jsonschema.Draft202012Validator(CATALOG_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise CatalogConfigurationException(
            source,
            [f"{'/'.join(str(p) for p in e.path) or '<root>'}: {e.message}" for e in errors],
        )
    try:
        definitions = [_to_definition(entry) for entry in data["types"]]
    except ValidationException as e:
        raise CatalogConfigurationException(source, [e.message]) from e
    catalog = DocumentTypeCatalog(data["name"], definitions)
    logger.debug("Loaded catalog %s from %s (%d types)", catalog.name, source, len(catalog))
    return catalog


def load_catalog(path: str | Path) -> DocumentTypeCatalog:
    """Read a catalog JSON file and build the registry.

    Raises:
        CatalogConfigurationException: If the file is missing, is not valid
            JSON, or fails validation.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogConfigurationException(
            str(path), [str(e)], message=f"Catalog file not found: {path}"
        ) from e
    except json.JSONDecodeError as e:
        raise CatalogConfigurationException(str(path), [str(e)]) from e
    return build_catalog(data, source=str(path))
