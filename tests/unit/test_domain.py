"""Tests for domain entities, value objects, enums, and exceptions."""

import dataclasses

import pytest

from fleetdocs.domain.entities.document_type import DocumentTypeDefinition
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
from fleetdocs.domain.value_objects.core import AlertStatus, EntityProfile
from tests.conftest import make_type


class TestDocumentTypeDefinition:
    def test_valid_required_definition(self) -> None:
        definition = make_type("permis_conducere", default_validity_months=120)
        assert definition.bucket == RequirementBucket.REQUIRED
        assert definition.tracks_expiry is True

    def test_string_condition_is_coerced(self) -> None:
        definition = make_type(
            "pasaport",
            required=False,
            conditional_required=True,
            required_condition="international",
        )
        assert definition.required_condition is RequiredCondition.INTERNATIONAL
        assert definition.bucket == RequirementBucket.CONDITIONAL

    def test_unknown_condition_rejected(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            make_type(
                "x",
                required=False,
                conditional_required=True,
                required_condition="oversize",
            )
        assert exc_info.value.details == {"field": "required_condition"}

    def test_conditional_needs_condition(self) -> None:
        with pytest.raises(ValidationException, match="needs a required_condition"):
            make_type("x", required=False, conditional_required=True)

    @pytest.mark.parametrize(
        "gates",
        [
            {"required": False},
            {"required": True, "recommended": True},
            {
                "required": True,
                "conditional_required": True,
                "required_condition": RequiredCondition.ADR,
            },
        ],
    )
    def test_exactly_one_gate(self, gates: dict) -> None:
        with pytest.raises(ValidationException, match="exactly one"):
            make_type("x", **gates)

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            make_type("x", name="  ")
        assert exc_info.value.details["field"] == "name"

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(ValidationException):
            DocumentTypeDefinition(key="", name="X", category="hr", required=True)

    def test_negative_months_rejected(self) -> None:
        with pytest.raises(ValidationException, match="default_validity_months"):
            make_type("x", default_validity_months=-1)

    def test_non_expiring_recommended(self) -> None:
        definition = make_type(
            "cazier_auto", required=False, recommended=True, expires=False
        )
        assert definition.bucket == RequirementBucket.RECOMMENDED
        assert definition.tracks_expiry is False

    def test_frozen(self) -> None:
        definition = make_type("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            definition.required = False


class TestValueObjects:
    def test_profile_defaults_to_no_capabilities(self) -> None:
        profile = EntityProfile()
        assert not (profile.has_international_routes or profile.has_adr or profile.has_frigo)

    @pytest.mark.parametrize("priority", [-1, 6])
    def test_alert_priority_range(self, priority: int) -> None:
        with pytest.raises(ValidationException):
            AlertStatus(AlertColor.RED, AlertStatusCode.EXPIRED, "x", priority)

    def test_alert_status_equality(self) -> None:
        a = AlertStatus(AlertColor.GREEN, AlertStatusCode.OK, "OK", 0)
        b = AlertStatus(AlertColor.GREEN, AlertStatusCode.OK, "OK", 0)
        assert a == b


class TestEnums:
    def test_condition_values(self) -> None:
        assert RequiredCondition.values() == ["international", "adr", "frigo"]

    def test_entity_kinds(self) -> None:
        assert EntityKind.values() == ["driver", "truck", "trailer"]

    def test_expiring_tiers(self) -> None:
        assert AlertStatusCode.expiring() == {
            AlertStatusCode.CRITICAL,
            AlertStatusCode.URGENT,
            AlertStatusCode.WARNING,
        }

    def test_missing_priority_rank(self) -> None:
        ranks = sorted(MissingPriority, key=lambda p: p.rank)
        assert ranks == [MissingPriority.HIGH, MissingPriority.MEDIUM, MissingPriority.LOW]

    def test_str_enum_compares_to_value(self) -> None:
        assert AlertStatusCode.EXPIRED == "expired"
        assert MissingPriority("medium") is MissingPriority.MEDIUM


class TestExceptions:
    def test_hierarchy(self) -> None:
        assert issubclass(ValidationException, FleetDocsException)
        assert issubclass(CatalogConfigurationException, FleetDocsException)

    def test_default_error_code_is_class_name(self) -> None:
        assert FleetDocsException("boom").error_code == "FleetDocsException"

    def test_catalog_exception_details(self) -> None:
        exc = CatalogConfigurationException("driver.json", ["types/0: bad"])
        assert exc.message == "Invalid document type catalog: driver.json"
        assert exc.details == {"source": "driver.json", "errors": ["types/0: bad"]}
        assert str(exc) == exc.message
