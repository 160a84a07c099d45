"""Environment-driven configuration for the invoicing library."""
