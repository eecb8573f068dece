from __future__ import annotations

from fastapi import Depends, Header, HTTPException, Security
from fastapi.security import APIKeyHeader

from .models.session import LedgerSession
from .settings import Settings, get_settings

api_key_header: APIKeyHeader = APIKeyHeader(
    name="x-api-key", scheme_name="ApiKeyAuth", auto_error=False
)


def verify_api_key(
    x_api_key: str | None = Security(api_key_header),
    settings: Settings = Depends(get_settings),
) -> None:
    if not x_api_key or x_api_key != settings.api_key:
        raise HTTPException(status_code=401, detail={"error": "Unauthorized"})


def get_session(
    x_user_email: str | None = Header(None, description="Email of the authenticated user."),
    x_user_name: str | None = Header(None, description="Display name of the authenticated user."),
    settings: Settings = Depends(get_settings),
) -> LedgerSession:
    """Build the ledger session from the identity forwarded by the auth layer."""
    if not x_user_email:
        raise HTTPException(status_code=401, detail={"error": "Missing user identity"})
    return LedgerSession.from_auth(
        {"email": x_user_email, "displayName": x_user_name},
        timezone=settings.default_timezone,
    )


__all__ = ["api_key_header", "verify_api_key", "get_session"]
