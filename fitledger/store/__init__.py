"""Ledger store port and adapters."""

from .application import LedgerStore
from .infrastructure import (
    FirebaseLedgerStore,
    InMemoryLedgerStore,
    create_firebase_store,
    create_in_memory_store,
)

__all__ = [
    "LedgerStore",
    "FirebaseLedgerStore",
    "InMemoryLedgerStore",
    "create_firebase_store",
    "create_in_memory_store",
]
