"""Farm ledger: transaction tracking pipeline for a small livestock farm."""

__version__ = "0.1.0"
