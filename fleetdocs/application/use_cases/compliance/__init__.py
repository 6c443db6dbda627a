"""Compliance use cases."""

from fleetdocs.application.use_cases.compliance.build_compliance_report import (
    ComplianceEngine,
    compute_compliance_percent,
)

__all__ = ["ComplianceEngine", "compute_compliance_percent"]
