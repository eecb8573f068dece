"""In-process implementation of the ledger store port."""
from __future__ import annotations

import copy
from typing import Any, Dict, Optional

from ...domain.paths import split
from ..application.ports import LedgerStore


class InMemoryLedgerStore(LedgerStore):
    """Nested-dict tree with the same path semantics as the remote store.

    Writing below a leaf replaces the leaf with a node. Values are copied in
    and out so callers never share state with the tree.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._root: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(self._root)

    async def read(self, path: str) -> Optional[Any]:
        node: Any = self._root
        for segment in split(path):
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return copy.deepcopy(node)

    async def write(self, path: str, value: Any) -> None:
        segments = split(path)
        if not segments:
            raise ValueError("Cannot replace the store root")
        node = self._root
        for segment in segments[:-1]:
            child = node.get(segment)
            if not isinstance(child, dict):
                child = {}
                node[segment] = child
            node = child
        if value is None:
            node.pop(segments[-1], None)
        else:
            node[segments[-1]] = copy.deepcopy(value)

    async def delete(self, path: str) -> None:
        segments = split(path)
        if not segments:
            self._root.clear()
            return
        node: Any = self._root
        for segment in segments[:-1]:
            if not isinstance(node, dict) or segment not in node:
                return
            node = node[segment]
        if isinstance(node, dict):
            node.pop(segments[-1], None)


def create_in_memory_store(initial: Optional[Dict[str, Any]] = None) -> LedgerStore:
    return InMemoryLedgerStore(initial)
