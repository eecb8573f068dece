from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field

from ..domain.identity import normalize_email


def current_date(timezone: str = "UTC") -> str:
    """Return today's calendar date in ``timezone`` as ``YYYY-MM-DD``."""

    now: datetime = datetime.now(ZoneInfo(timezone))
    return now.date().isoformat()


class LedgerSession(BaseModel):
    """Identity of the signed-in user, passed explicitly into ledger calls."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    email: str = Field(..., min_length=1)
    display_name: str = Field("", alias="displayName")
    token: Optional[str] = None
    timezone: str = "UTC"

    @classmethod
    def from_auth(cls, payload: Mapping[str, Any], *, timezone: str = "UTC") -> "LedgerSession":
        """Build a session from an authentication result."""
        return cls(
            email=payload["email"],
            display_name=payload.get("displayName") or "",
            token=payload.get("token"),
            timezone=timezone,
        )

    @property
    def user_key(self) -> str:
        return normalize_email(self.email)

    def today(self) -> str:
        return current_date(self.timezone)


__all__ = ["LedgerSession", "current_date"]
