"""fleetdocs: document compliance and expiry alerting for fleet drivers and vehicles.

Layers: domain (entities, value objects, enums, exceptions), application
(services, use cases, DTOs, ports), infrastructure (catalog registry and
loaders), schemas (pydantic projections for the API/UI layer).
"""

__version__ = "1.0.0"
