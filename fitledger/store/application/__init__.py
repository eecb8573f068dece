"""Application layer ports for the ledger store."""

from .ports import LedgerStore

__all__ = ["LedgerStore"]
