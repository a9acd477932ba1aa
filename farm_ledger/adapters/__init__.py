"""Entry points and user interfaces for the farm ledger."""

__all__ = []
