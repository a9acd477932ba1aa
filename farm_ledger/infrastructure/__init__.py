"""Infrastructure adapters for the farm ledger."""
