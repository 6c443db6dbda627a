"""Pytest configuration and fixtures for fleetdocs.

Catalog fixtures are built in memory so tests do not depend on the
bundled JSON data; the bundled catalogs have their own tests.
"""

from datetime import date, timedelta
from typing import Any

import pytest

from fleetdocs.core.config import Settings, get_settings
from fleetdocs.domain.entities.document import DocumentInstance
from fleetdocs.domain.entities.document_type import DocumentTypeDefinition
from fleetdocs.domain.enums import RequiredCondition
from fleetdocs.infrastructure.catalog.factory import get_catalog
from fleetdocs.infrastructure.catalog.registry import DocumentTypeCatalog

TODAY = date(2025, 6, 1)


def make_type(key: str, **overrides: Any) -> DocumentTypeDefinition:
    """Document type with sensible defaults (required, expiring, 90-day alert)."""
    fields: dict[str, Any] = {
        "key": key,
        "name": key.replace("_", " ").title(),
        "category": "hr",
        "description": f"{key} description",
        "required": True,
        "expires": True,
        "alert_days_before": 90,
    }
    fields.update(overrides)
    return DocumentTypeDefinition(**fields)


def make_doc(
    doc_type: str,
    days_from_today: int | None = None,
    doc_id: str | None = None,
) -> DocumentInstance:
    """Document expiring days_from_today days after TODAY (None = no date)."""
    expiry = TODAY + timedelta(days=days_from_today) if days_from_today is not None else None
    return DocumentInstance(
        id=doc_id or f"doc-{doc_type}",
        owner_id="driver-1",
        doc_type=doc_type,
        doc_number="X-1",
        expiry_date=expiry,
    )


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the developer's environment."""
    return Settings(timezone="UTC", catalog_dir=None, compliance_fallback_percent=100)


@pytest.fixture
def basic_catalog() -> DocumentTypeCatalog:
    """Three unconditionally required types: contract (no expiry), id_card, license."""
    return DocumentTypeCatalog(
        "basic",
        [
            make_type("contract", expires=False, alert_days_before=None),
            make_type("id_card"),
            make_type("license"),
        ],
    )


@pytest.fixture
def mixed_catalog() -> DocumentTypeCatalog:
    """Required, conditional (international/adr/frigo) and recommended types."""
    return DocumentTypeCatalog(
        "mixed",
        [
            make_type("contract", expires=False, alert_days_before=None),
            make_type(
                "criminal_record",
                required=False,
                recommended=True,
                expires=False,
                alert_days_before=None,
                periodic_review=True,
                review_interval_months=12,
            ),
            make_type(
                "passport",
                required=False,
                conditional_required=True,
                required_condition=RequiredCondition.INTERNATIONAL,
                alert_days_before=180,
            ),
            make_type("id_card"),
            make_type(
                "adr_certificate",
                required=False,
                conditional_required=True,
                required_condition=RequiredCondition.ADR,
            ),
            make_type(
                "driving_record",
                required=False,
                recommended=True,
                expires=False,
                alert_days_before=None,
            ),
            make_type(
                "frigo_certificate",
                required=False,
                conditional_required=True,
                required_condition=RequiredCondition.FRIGO,
            ),
        ],
    )


@pytest.fixture
def clear_caches():
    """Clear settings and catalog caches before and after a test that touches env."""
    get_settings.cache_clear()
    get_catalog.cache_clear()
    yield
    get_settings.cache_clear()
    get_catalog.cache_clear()
