"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (catalog registry).
"""

from fleetdocs.application.interfaces import IDocumentTypeCatalog
from fleetdocs.application.services import (
    AlertClassifier,
    ExpiryCalculator,
    RequirementResolver,
)
from fleetdocs.application.use_cases import ComplianceEngine

__all__ = [
    "AlertClassifier",
    "ComplianceEngine",
    "ExpiryCalculator",
    "IDocumentTypeCatalog",
    "RequirementResolver",
]
