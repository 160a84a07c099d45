"""Shared builders, constants and recording test doubles."""

from __future__ import annotations

from typing import List, Optional, Tuple
from uuid import UUID, uuid4

from domain.client import ClientData
from domain.invoice import Invoice
from domain.money import ZERO, Money
from domain.product import ProductData, ProductType
from domain.tax import Tax

EXAMPLE_CLIENT_DATA = ClientData(
    client_id=UUID("00000000-0000-0000-0000-0000000000c1"),
    name="Karol Nowak",
)
EXAMPLE_INVOICE_ID = UUID("00000000-0000-0000-0000-0000000000f1")
EXAMPLE_TAX = Tax(amount=ZERO, description="example tax name")


def make_product(
    product_type: ProductType = ProductType.STANDARD,
    name: str = "example product name",
    price: Money = ZERO,
    product_id: Optional[UUID] = None,
) -> ProductData:
    return ProductData(
        product_id=product_id or uuid4(),
        name=name,
        price=price,
        product_type=product_type,
        snapshot_at=None,
    )


class RecordingTaxPolicy:
    """Returns a fixed Tax and records every (product_type, net) it receives."""

    def __init__(self, result: Tax = EXAMPLE_TAX) -> None:
        self.result = result
        self.calls: List[Tuple[ProductType, Money]] = []

    def calculate_tax(self, product_type: ProductType, net: Money) -> Tax:
        self.calls.append((product_type, net))
        return self.result


class RecordingInvoiceFactory:
    """Hands out a prepared invoice and records the client data it was asked for."""

    def __init__(self, invoice: Optional[Invoice] = None) -> None:
        self.invoice = invoice
        self.calls: List[ClientData] = []

    def create(self, client: ClientData) -> Invoice:
        self.calls.append(client)
        if self.invoice is None:
            return Invoice(EXAMPLE_INVOICE_ID, client)
        return self.invoice
