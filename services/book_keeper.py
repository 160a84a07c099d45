"""
Book keeper: invoice issuance.

Turns an InvoiceRequest into a line-itemized Invoice:
1. Ask the invoice factory for an empty invoice for the request's client
   (exactly once, even when the request is empty)
2. For each requested item, in request order, ask the tax policy for the tax
   on (product type, net cost), exactly once per item
3. Append one InvoiceLine per item carrying the item's product, quantity and
   net cost unchanged, plus the tax just returned

Failures raised by the factory or the tax policy are not caught: they reach
the caller as-is and the invoice is left partially populated.
"""

from __future__ import annotations

import logging

from domain.invoice import Invoice, InvoiceLine
from domain.invoice_request import InvoiceRequest
from domain.tax import TaxPolicy
from services.invoice_factory import InvoiceFactory

logger = logging.getLogger(__name__)


class BookKeeper:
    def __init__(self, invoice_factory: InvoiceFactory) -> None:
        self._invoice_factory = invoice_factory

    def issuance(self, request: InvoiceRequest, tax_policy: TaxPolicy) -> Invoice:
        """
        Issue an invoice for the given request.

        Args:
            request: Client plus ordered requested items (may be empty)
            tax_policy: Decides the tax for each item; never called for an empty request

        Returns:
            The invoice created by the factory, with one line per requested item

        Example:
            book_keeper = BookKeeper(UuidInvoiceFactory())
            invoice = book_keeper.issuance(request, RateTableTaxPolicy(DEFAULT_TAX_RATES))
            print(f"{len(invoice)} lines, gross {invoice.gross}")
        """
        invoice = self._invoice_factory.create(request.client)

        for item in request.items:
            tax = tax_policy.calculate_tax(item.product.product_type, item.total_cost)

            invoice.add_line(InvoiceLine(
                product=item.product,
                quantity=item.quantity,
                net=item.total_cost,
                tax=tax,
            ))

            logger.debug(
                "Added line for product %s to invoice %s",
                item.product.product_id,
                invoice.invoice_id,
                extra={
                    "invoice_id": str(invoice.invoice_id),
                    "product_id": str(item.product.product_id),
                    "quantity": item.quantity,
                    "tax_description": tax.description,
                },
            )

        logger.info(
            "Issued invoice %s with %d line(s)",
            invoice.invoice_id,
            len(invoice),
            extra={"invoice_id": str(invoice.invoice_id), "line_count": len(invoice)},
        )

        return invoice


__all__ = [
    "BookKeeper",
]
