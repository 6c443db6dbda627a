"""Application services: pure computations over domain objects."""

from fleetdocs.application.services.alert_classifier import (
    AlertClassifier,
    alert_sort_key,
)
from fleetdocs.application.services.expiry_calculator import ExpiryCalculator
from fleetdocs.application.services.requirement_resolver import (
    RequirementResolver,
    missing_sort_key,
    profile_satisfies,
)

__all__ = [
    "AlertClassifier",
    "ExpiryCalculator",
    "RequirementResolver",
    "alert_sort_key",
    "missing_sort_key",
    "profile_satisfies",
]
