"""Domain value objects for fleetdocs.

Value objects are immutable types that represent domain concepts. They
have no identity, only value.
"""

from dataclasses import dataclass

from fleetdocs.domain.enums import AlertColor, AlertStatusCode
from fleetdocs.domain.exceptions import ValidationException


@dataclass(frozen=True)
class EntityProfile:
    """Capability flags of a driver or vehicle.

    Drives conditional document requirements: international routes
    (passport, TIR carnet, green card...), ADR dangerous goods, and FRIGO
    refrigerated transport.
    """

    has_international_routes: bool = False
    has_adr: bool = False
    has_frigo: bool = False


@dataclass(frozen=True)
class AlertStatus:
    """Visual severity tier of one document (color, status, label, priority).

    Priority ranges 0..5; 5 is the most severe (expired).
    """

    color: AlertColor
    status: AlertStatusCode
    label: str
    priority: int
    urgent: bool = False

    def __post_init__(self) -> None:
        """Validate priority range.

        Raises:
            ValidationException: If priority is outside 0..5.
        """
        if not 0 <= self.priority <= 5:
            raise ValidationException(
                f"Alert priority must be between 0 and 5, got {self.priority}",
                field="priority",
            )
