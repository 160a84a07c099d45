"""
Domain: Client data.

Descriptive snapshot of the buyer an invoice is issued to. The invoicing
model only needs identity and a display name; account management lives
elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class ClientData:
    """
    Client identity and name as printed on an invoice.

    Equality is structural: two snapshots with the same id and name are the
    same client data.
    """

    client_id: UUID
    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")
