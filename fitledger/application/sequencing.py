"""Discard fetch results that arrive after a newer request for the same view."""

from __future__ import annotations

import itertools
from typing import Awaitable, Dict, Hashable, Tuple, TypeVar

T = TypeVar("T")


class RequestSequencer:
    """Hand out increasing tickets per key and report which one is current.

    Store reads cannot be cancelled and may resolve out of order. A consumer
    takes a ticket before each fetch and only applies the result while its
    ticket is still the latest for that key. A key is forgotten once its
    latest ticket has resolved through ``run``.
    """

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._latest: Dict[Hashable, int] = {}

    def issue(self, key: Hashable) -> int:
        ticket = next(self._counter)
        self._latest[key] = ticket
        return ticket

    def is_current(self, key: Hashable, ticket: int) -> bool:
        return self._latest.get(key) == ticket

    async def run(self, key: Hashable, awaitable: Awaitable[T]) -> Tuple[bool, T]:
        """Await ``awaitable`` under a fresh ticket.

        Returns ``(current, result)``; ``current`` is ``False`` when another
        request for ``key`` was issued while this one was in flight.
        """
        ticket = self.issue(key)
        try:
            result = await awaitable
        finally:
            current = self.is_current(key, ticket)
            if current:
                del self._latest[key]
        return current, result


__all__ = ["RequestSequencer"]
