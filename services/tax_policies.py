"""
Tax policies.

Ready-made TaxPolicy implementations for callers of the book keeper. The book
keeper itself never chooses a tax; it calls whichever policy it is given.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Dict, Mapping, Optional

from domain.money import Money, Numeric, to_decimal
from domain.product import ProductType
from domain.tax import DEFAULT_TAX_RATES, Tax

if TYPE_CHECKING:
    from config.settings import InvoicingSettings


# Suffix printed after the percentage for reduced-rate categories.
_LABEL_SUFFIXES: Mapping[ProductType, str] = {
    ProductType.DRUG: " (D)",
    ProductType.FOOD: " (F)",
}


class UnknownProductTypeError(LookupError):
    """Raised when a rate table has no entry for a product type."""
    pass


def _validate_rate(value: Numeric, name: str) -> Decimal:
    rate = to_decimal(value, name)
    if not rate.is_finite():
        raise ValueError(f"{name} must be a finite number, got {rate}")
    if rate < 0 or rate > 1:
        raise ValueError(f"{name} must be between 0 and 1, got {rate}")
    return rate


def format_rate(rate: Decimal) -> str:
    """Render a rate as a percentage label: Decimal('0.23') -> '23%'."""

    percent = (rate * 100).normalize()
    # normalize() turns 20 into 2E+1
    if percent == percent.to_integral_value():
        percent = percent.quantize(Decimal("1"))
    return f"{percent}%"


class RateTableTaxPolicy:
    """
    Tax = net * rate, with the rate looked up by product type.

    labels overrides the generated description per product type.
    """

    def __init__(
        self,
        rates: Mapping[ProductType, Numeric],
        labels: Optional[Mapping[ProductType, str]] = None,
    ) -> None:
        self._rates: Dict[ProductType, Decimal] = {
            product_type: _validate_rate(rate, f"rate for {product_type.value}")
            for product_type, rate in rates.items()
        }
        self._labels: Dict[ProductType, str] = dict(labels or {})

    @property
    def rates(self) -> Mapping[ProductType, Decimal]:
        return dict(self._rates)

    def describe(self, product_type: ProductType) -> str:
        if product_type in self._labels:
            return self._labels[product_type]
        return format_rate(self._rates[product_type]) + _LABEL_SUFFIXES.get(product_type, "")

    def calculate_tax(self, product_type: ProductType, net: Money) -> Tax:
        rate = self._rates.get(product_type)
        if rate is None:
            raise UnknownProductTypeError(f"No tax rate configured for {product_type.value}")
        return Tax(amount=net.multiply_by(rate), description=self.describe(product_type))


class FlatTaxPolicy:
    """Same rate for every product type."""

    def __init__(self, rate: Numeric, description: Optional[str] = None) -> None:
        self._rate = _validate_rate(rate, "rate")
        self._description = description if description is not None else format_rate(self._rate)

    def calculate_tax(self, product_type: ProductType, net: Money) -> Tax:
        return Tax(amount=net.multiply_by(self._rate), description=self._description)


def rate_table_from_settings(settings: "InvoicingSettings") -> RateTableTaxPolicy:
    """Build the rate table policy configured through the environment."""

    return RateTableTaxPolicy(settings.tax_rates)


__all__ = [
    "DEFAULT_TAX_RATES",
    "FlatTaxPolicy",
    "RateTableTaxPolicy",
    "UnknownProductTypeError",
    "format_rate",
    "rate_table_from_settings",
]
