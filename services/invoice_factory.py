"""
Invoice factory.

Creates fresh, empty invoices. Identity assignment is the factory's job; the
book keeper only asks for a new invoice for a client.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol
from uuid import UUID, uuid4

from domain.client import ClientData
from domain.invoice import Invoice

logger = logging.getLogger(__name__)


class InvoiceFactory(Protocol):
    def create(self, client: ClientData) -> Invoice:
        ...


class UuidInvoiceFactory:
    """
    Default factory: every invoice gets a new random UUID.

    id_generator can be swapped for deterministic ids in tests or imports.
    """

    def __init__(self, id_generator: Callable[[], UUID] = uuid4) -> None:
        self._id_generator = id_generator

    def create(self, client: ClientData) -> Invoice:
        invoice = Invoice(self._id_generator(), client)
        logger.debug(
            "Created invoice %s for client %s",
            invoice.invoice_id,
            client.client_id,
            extra={"invoice_id": str(invoice.invoice_id), "client_id": str(client.client_id)},
        )
        return invoice


__all__ = [
    "InvoiceFactory",
    "UuidInvoiceFactory",
]
