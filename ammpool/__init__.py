"""Constant-product market maker pool over an in-memory token ledger."""

__version__ = "0.1.0"