"""Infrastructure adapters for the ledger store."""

from .firebase import FirebaseLedgerStore, create_firebase_store
from .memory import InMemoryLedgerStore, create_in_memory_store

__all__ = [
    "FirebaseLedgerStore",
    "create_firebase_store",
    "InMemoryLedgerStore",
    "create_in_memory_store",
]
