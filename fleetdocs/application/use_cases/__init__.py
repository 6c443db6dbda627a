"""Application use cases."""

from fleetdocs.application.use_cases.compliance import ComplianceEngine

__all__ = ["ComplianceEngine"]
