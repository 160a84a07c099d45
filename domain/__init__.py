"""
Domain model for invoicing: money, clients, products, taxes, requests and invoices.

Pure value objects and aggregates only: no I/O, no frameworks.
"""

from .client import ClientData
from .invoice import Invoice, InvoiceLine
from .invoice_request import InvoiceRequest, RequestItem
from .money import DEFAULT_CURRENCY, ZERO, CurrencyMismatchError, Money
from .product import ProductData, ProductType
from .tax import DEFAULT_TAX_RATES, Tax, TaxPolicy

__all__ = [
    "ClientData",
    "CurrencyMismatchError",
    "DEFAULT_CURRENCY",
    "DEFAULT_TAX_RATES",
    "Invoice",
    "InvoiceLine",
    "InvoiceRequest",
    "Money",
    "ProductData",
    "ProductType",
    "RequestItem",
    "Tax",
    "TaxPolicy",
    "ZERO",
]
