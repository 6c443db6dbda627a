"""Document type definition (one catalog entry).

Describes one kind of regulatory document: whether it expires, its alert
threshold, and whether it is mandatory, conditionally mandatory, or
recommended. Pure configuration data; immutable once constructed.
"""

from dataclasses import dataclass

from fleetdocs.domain.enums import RequiredCondition, RequirementBucket
from fleetdocs.domain.exceptions import ValidationException


@dataclass(frozen=True)
class DocumentTypeDefinition:
    """Catalog entry keyed by a stable type code (e.g. 'permis_conducere').

    Exactly one of required, conditional_required, recommended is the gate
    the entry participates in for missing-document resolution. A
    conditional entry must name the profile condition it depends on.
    Validation runs on construction.
    """

    key: str
    name: str
    category: str
    description: str = ""
    icon: str | None = None
    required: bool = False
    conditional_required: bool = False
    required_condition: RequiredCondition | None = None
    recommended: bool = False
    expires: bool = False
    default_validity_months: int | None = None
    alert_days_before: int | None = None
    periodic_review: bool = False
    review_interval_months: int | None = None
    one_time: bool = False
    # Informational only (vehicle permits consumed per use / per trip)
    per_use: bool = False
    per_trip: bool = False

    def __post_init__(self) -> None:
        if self.required_condition is not None and not isinstance(
            self.required_condition, RequiredCondition
        ):
            try:
                condition = RequiredCondition(self.required_condition)
            except ValueError as e:
                raise ValidationException(
                    f"Document type {self.key!r}: unknown required_condition "
                    f"{self.required_condition!r} (expected one of "
                    f"{', '.join(RequiredCondition.values())})",
                    field="required_condition",
                ) from e
            object.__setattr__(self, "required_condition", condition)
        self.validate()

    def validate(self) -> None:
        """Validate definition rules. Raises ValidationException if invalid."""
        if not self.key:
            raise ValidationException("Document type key is required", field="key")
        if not self.name or not self.name.strip():
            raise ValidationException(
                f"Document type {self.key!r}: name is required", field="name"
            )
        if self.conditional_required and self.required_condition is None:
            raise ValidationException(
                f"Document type {self.key!r}: conditional_required needs a required_condition",
                field="required_condition",
            )
        gates = [self.required, self.conditional_required, self.recommended]
        if sum(gates) != 1:
            raise ValidationException(
                f"Document type {self.key!r}: exactly one of required, "
                "conditional_required, recommended must be set",
                field="required",
            )
        for field_name in (
            "default_validity_months",
            "alert_days_before",
            "review_interval_months",
        ):
            value = getattr(self, field_name)
            if value is not None and value < 0:
                raise ValidationException(
                    f"Document type {self.key!r}: {field_name} must be >= 0",
                    field=field_name,
                )

    @property
    def bucket(self) -> RequirementBucket:
        """Display bucket: required, then conditional, then recommended."""
        if self.required:
            return RequirementBucket.REQUIRED
        if self.conditional_required:
            return RequirementBucket.CONDITIONAL
        return RequirementBucket.RECOMMENDED

    @property
    def tracks_expiry(self) -> bool:
        """True when the type has a hard expiry or a periodic review."""
        return self.expires or self.periodic_review
