"""Document instance domain entity.

A snapshot of one document on file for a driver or vehicle, as read from
the persistence layer. Created and updated outside this package.
"""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class DocumentInstance:
    """Read-only document snapshot (id, owner, catalog type, expiry).

    expiry_date is kept as delivered by the persistence layer: a date, a
    datetime, an ISO-8601 string, or None. Parsing happens in the expiry
    calculator so unparseable values degrade to "no day count".
    """

    id: str
    owner_id: str
    doc_type: str
    doc_number: str | None = None
    expiry_date: date | datetime | str | None = None
