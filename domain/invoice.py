"""
Domain: Invoice aggregate.

Rules implemented here:
- Identity (invoice_id) and client are fixed when the invoice is created.
- Lines can only be appended; there is no remove or reorder.
- Equality and hashing are by invoice_id, not by content.
- Net and gross totals are derived from the lines on read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple
from uuid import UUID

from .client import ClientData
from .money import Money
from .product import ProductData
from .tax import Tax


@dataclass(frozen=True, slots=True)
class InvoiceLine:
    """
    Finalized invoice entry.

    net is the requested item's cost taken verbatim; tax is the policy result
    for that item.
    """

    product: ProductData
    quantity: int
    net: Money
    tax: Tax

    @property
    def gross(self) -> Money:
        return self.net + self.tax.amount


class Invoice:
    """
    Identified, client-scoped, append-only sequence of invoice lines.

    Invoices are created empty by an invoice factory and populated during
    issuance.
    """

    __slots__ = ("_invoice_id", "_client", "_lines")

    def __init__(self, invoice_id: UUID, client: ClientData) -> None:
        self._invoice_id = invoice_id
        self._client = client
        self._lines: List[InvoiceLine] = []

    @property
    def invoice_id(self) -> UUID:
        return self._invoice_id

    @property
    def client(self) -> ClientData:
        return self._client

    @property
    def lines(self) -> Tuple[InvoiceLine, ...]:
        return tuple(self._lines)

    def add_line(self, line: InvoiceLine) -> None:
        self._lines.append(line)

    @property
    def net(self) -> Money:
        """Sum of line nets (ZERO for an empty invoice)."""

        return Money.sum(line.net for line in self._lines)

    @property
    def gross(self) -> Money:
        """Sum of line nets plus their taxes (ZERO for an empty invoice)."""

        return Money.sum(line.gross for line in self._lines)

    def __iter__(self) -> Iterator[InvoiceLine]:
        return iter(tuple(self._lines))

    def __len__(self) -> int:
        return len(self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Invoice):
            return NotImplemented
        return self._invoice_id == other._invoice_id

    def __hash__(self) -> int:
        return hash(self._invoice_id)

    def __repr__(self) -> str:
        return (
            f"Invoice(invoice_id={self._invoice_id!r}, client={self._client!r}, "
            f"lines={len(self._lines)})"
        )
