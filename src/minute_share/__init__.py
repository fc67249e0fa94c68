"""Minute Share - shared minute ledger and per-minute rate calculator."""

__version__ = "0.1.0"
