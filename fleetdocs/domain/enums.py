"""Domain enumerations for fleetdocs.

Enums represent fixed sets of domain values (e.g. requirement conditions,
alert tiers).
"""

from enum import Enum


class RequiredCondition(str, Enum):
    """Capability a document type depends on to become mandatory.

    A conditionally-required document type is mandatory only when the
    owning entity's profile has the matching flag set.
    """

    INTERNATIONAL = "international"
    ADR = "adr"
    FRIGO = "frigo"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid condition codes as strings.

        Returns:
            List of enum value strings (e.g. for JSON Schema enums).
        """
        return [condition.value for condition in cls]


class AlertColor(str, Enum):
    """Badge color of a visual severity tier."""

    GRAY = "gray"
    BLUE = "blue"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"


class AlertStatusCode(str, Enum):
    """Visual severity tier of a document's time-to-expiry."""

    NO_EXPIRY = "no_expiry"
    REVIEW_RECOMMENDED = "review_recommended"
    UNKNOWN = "unknown"
    EXPIRED = "expired"
    CRITICAL = "critical"
    URGENT = "urgent"
    WARNING = "warning"
    OK = "ok"

    @classmethod
    def expiring(cls) -> frozenset["AlertStatusCode"]:
        """Tiers counted as 'expiring' (not yet expired, inside 90 days)."""
        return frozenset({cls.CRITICAL, cls.URGENT, cls.WARNING})


class MissingPriority(str, Enum):
    """Priority of a missing document in the missing-document report."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank: high=0, medium=1, low=2."""
        return _MISSING_PRIORITY_RANK[self]


_MISSING_PRIORITY_RANK = {
    MissingPriority.HIGH: 0,
    MissingPriority.MEDIUM: 1,
    MissingPriority.LOW: 2,
}


class RequirementBucket(str, Enum):
    """Display bucket of a catalog entry (mandatory, conditional, recommended)."""

    REQUIRED = "required"
    CONDITIONAL = "conditional"
    RECOMMENDED = "recommended"


class EntityKind(str, Enum):
    """Kind of entity documents are attached to; selects the catalog."""

    DRIVER = "driver"
    TRUCK = "truck"
    TRAILER = "trailer"

    @classmethod
    def values(cls) -> list[str]:
        """Return all entity kinds as strings."""
        return [kind.value for kind in cls]
