"""
Invoicing settings.

Values are read from the environment, after loading the project's .env file
(if present) with python-dotenv. Variables already set in the process
environment win over the .env file.

Environment variables (all optional):
- INVOICING_DEFAULT_CURRENCY: currency code for new amounts (default: EUR)
- INVOICING_TAX_RATE_STANDARD: rate for standard products (default: 0.23)
- INVOICING_TAX_RATE_FOOD: rate for food products (default: 0.07)
- INVOICING_TAX_RATE_DRUG: rate for drug products (default: 0.05)

The configured currency is applied through InvoicingSettings.money() only;
domain.money.DEFAULT_CURRENCY and ZERO are fixed at EUR.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from domain.money import DEFAULT_CURRENCY, Money, Numeric
from domain.product import ProductType
from domain.tax import DEFAULT_TAX_RATES

logger = logging.getLogger(__name__)

# .env lives at the project root, next to pyproject.toml
ENV_PATH: Path = Path(__file__).parent.parent / ".env"

_TAX_RATE_VARS: Mapping[ProductType, str] = {
    ProductType.STANDARD: "INVOICING_TAX_RATE_STANDARD",
    ProductType.FOOD: "INVOICING_TAX_RATE_FOOD",
    ProductType.DRUG: "INVOICING_TAX_RATE_DRUG",
}


@dataclass(frozen=True, slots=True)
class InvoicingSettings:
    default_currency: str
    tax_rates: Mapping[ProductType, Decimal]

    def money(self, amount: Numeric) -> Money:
        """Amount in the configured default currency."""

        return Money(amount, self.default_currency)


def _parse_rate(variable: str, raw: str) -> Decimal:
    try:
        rate = Decimal(raw.strip())
    except InvalidOperation:
        raise RuntimeError(
            f"Invalid value for environment variable {variable}: {raw!r}. "
            "Expected a decimal fraction such as 0.23."
        ) from None
    if not rate.is_finite() or rate < 0 or rate > 1:
        raise RuntimeError(
            f"Invalid value for environment variable {variable}: {raw!r}. "
            "Tax rates must be between 0 and 1."
        )
    return rate


def load_settings(env: Optional[Mapping[str, str]] = None) -> InvoicingSettings:
    """
    Build InvoicingSettings from the environment.

    Args:
        env: Mapping to read instead of os.environ (the .env file is not
             loaded in that case)

    Raises:
        RuntimeError: If a variable is set to an invalid value
    """
    if env is None:
        load_dotenv(dotenv_path=ENV_PATH)
        env = os.environ

    currency = env.get("INVOICING_DEFAULT_CURRENCY", DEFAULT_CURRENCY).strip().upper()
    if not currency.isalpha() or len(currency) != 3:
        raise RuntimeError(
            f"Invalid value for environment variable INVOICING_DEFAULT_CURRENCY: {currency!r}. "
            "Expected a three-letter currency code such as EUR."
        )

    tax_rates = dict(DEFAULT_TAX_RATES)
    for product_type, variable in _TAX_RATE_VARS.items():
        raw = env.get(variable)
        if raw is not None and raw.strip():
            tax_rates[product_type] = _parse_rate(variable, raw)

    logger.debug(
        "Loaded invoicing settings",
        extra={
            "default_currency": currency,
            "tax_rates": {product_type.value: str(rate) for product_type, rate in tax_rates.items()},
        },
    )

    return InvoicingSettings(default_currency=currency, tax_rates=tax_rates)


__all__ = [
    "ENV_PATH",
    "InvoicingSettings",
    "load_settings",
]
