"""Canonical user keys derived from raw email addresses."""

from __future__ import annotations

from ..errors import InvalidInput


def normalize_email(raw_email: str) -> str:
    """Return the canonical storage key for ``raw_email``.

    Everything from the first ``.`` onwards is discarded and the rest is
    lowercased, so ``John.Doe@x.com`` becomes ``john``. When the first dot
    belongs to the domain, the ``@domain`` part goes with it
    (``johndoe@x.com`` becomes ``johndoe``). An address without any dot is
    kept whole.

    Distinct addresses can share a key (``john.doe@x.com`` and
    ``john@y.com``). Ledgers written by the older mobile client used the
    same cut for dotted local parts, but kept the domain stem for addresses
    like ``johndoe@x.com`` (``johndoe@x``); those users need their root
    moved before they see their history.
    """
    if not raw_email:
        raise InvalidInput("Email must not be empty")
    head, dot, _ = raw_email.partition(".")
    if dot and "@" in head:
        head = head.split("@", 1)[0]
    if not head:
        raise InvalidInput(f"Email {raw_email!r} has no usable identity prefix")
    return head.lower()


__all__ = ["normalize_email"]
