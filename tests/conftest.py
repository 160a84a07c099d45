"""
Pytest configuration and shared fixtures.

Adds the project root to the Python path so tests can import the domain,
services and config packages without installing the project.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from helpers import (  # noqa: E402
    EXAMPLE_CLIENT_DATA,
    EXAMPLE_INVOICE_ID,
    RecordingInvoiceFactory,
    RecordingTaxPolicy,
)
from domain.invoice import Invoice  # noqa: E402


@pytest.fixture
def tax_policy() -> RecordingTaxPolicy:
    return RecordingTaxPolicy()


@pytest.fixture
def invoice_factory() -> RecordingInvoiceFactory:
    return RecordingInvoiceFactory(Invoice(EXAMPLE_INVOICE_ID, EXAMPLE_CLIENT_DATA))
