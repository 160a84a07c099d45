"""Invoice issuance services: book keeper, invoice factory and tax policies."""
