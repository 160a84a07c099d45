"""
Domain: Product descriptor.

Products are referenced by invoices as immutable snapshots. The product type
is what tax policies key on.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional
from uuid import UUID

from .money import Money


class ProductType(str, Enum):
    STANDARD = "STANDARD"
    FOOD = "FOOD"
    DRUG = "DRUG"


def _require_utc(name: str, value: datetime) -> None:
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware (UTC)")
    if value.utcoffset() != timedelta(0):
        raise ValueError(f"{name} must be a UTC timestamp (offset 0)")


@dataclass(frozen=True, slots=True)
class ProductData:
    """
    Snapshot of a catalogue product at the time it was requested.

    snapshot_at is optional; when given it must be UTC.
    """

    product_id: UUID
    name: str
    price: Money
    product_type: ProductType
    snapshot_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.snapshot_at is not None:
            _require_utc("snapshot_at", self.snapshot_at)
