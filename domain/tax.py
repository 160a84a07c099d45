"""
Domain: Tax determination and the tax policy capability.

A TaxPolicy is anything with a `calculate_tax(product_type, net)` method.
Which tax applies is decided entirely by the policy the caller supplies.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, Protocol, runtime_checkable

from .money import Money
from .product import ProductType

# Rates the book keeper applied before tax calculation became pluggable.
DEFAULT_TAX_RATES: Mapping[ProductType, Decimal] = {
    ProductType.DRUG: Decimal("0.05"),
    ProductType.FOOD: Decimal("0.07"),
    ProductType.STANDARD: Decimal("0.23"),
}


@dataclass(frozen=True, slots=True)
class Tax:
    """Tax amount paired with its descriptive label (e.g. "23%")."""

    amount: Money
    description: str


@runtime_checkable
class TaxPolicy(Protocol):
    def calculate_tax(self, product_type: ProductType, net: Money) -> Tax:
        ...
