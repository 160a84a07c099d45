"""
Domain: Invoice request (sales request).

An InvoiceRequest is the input to issuance: the client plus the ordered list
of requested purchases. Each RequestItem already carries the net cost of its
line; pricing happens before the request is built.

Rules implemented here:
- Client data is fixed at construction.
- Items are kept in the order they were added; order is significant.
- The request accepts any RequestItem; item validity is checked by RequestItem.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .client import ClientData
from .money import Money
from .product import ProductData


@dataclass(frozen=True, slots=True)
class RequestItem:
    """One requested purchase: product, quantity and net cost of the line."""

    product: ProductData
    quantity: int
    total_cost: Money

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"quantity must be an integer, got {self.quantity!r}")
        if self.quantity <= 0:
            raise ValueError(f"quantity must be positive, got {self.quantity}")


class InvoiceRequest:
    """Append-only, ordered collection of RequestItems for one client."""

    __slots__ = ("_client", "_items")

    def __init__(self, client: ClientData) -> None:
        self._client = client
        self._items: List[RequestItem] = []

    @property
    def client(self) -> ClientData:
        return self._client

    @property
    def items(self) -> Tuple[RequestItem, ...]:
        return tuple(self._items)

    def add(self, item: RequestItem) -> None:
        self._items.append(item)

    def __iter__(self) -> Iterator[RequestItem]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"InvoiceRequest(client={self._client!r}, items={len(self._items)})"
