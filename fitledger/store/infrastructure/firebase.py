"""Firebase Realtime Database implementation of the ledger store port."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from ...domain.paths import split
from ...errors import StoreUnavailable
from ...settings import Settings
from ..application.ports import LedgerStore

logger = logging.getLogger(__name__)

# The database drops empty objects, so empty collections are kept as "".
EMPTY_PLACEHOLDER = ""


def encode_value(value: Any) -> Any:
    """Prepare ``value`` for the database, preserving empty collections."""
    if isinstance(value, dict):
        if not value:
            return EMPTY_PLACEHOLDER
        return {key: encode_value(child) for key, child in value.items()}
    return value


class FirebaseLedgerStore(LedgerStore):
    """Talk to the Realtime Database REST API (``{path}.json`` resources)."""

    def __init__(self, *, settings: Settings) -> None:
        if not settings.firebase_database_url:
            raise ValueError("firebase_database_url is not configured")
        self._base_url: str = settings.firebase_database_url.rstrip("/")
        self._auth_token: Optional[str] = settings.firebase_auth_token
        self._timeout: float = settings.store_timeout

    def _url(self, path: str) -> str:
        segments = [quote(segment, safe="") for segment in split(path)]
        return f"{self._base_url}/{'/'.join(segments)}.json"

    async def _request(
        self,
        method: str,
        path: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        allow_precondition_failed: bool = False,
        **kwargs: Any,
    ) -> httpx.Response:
        params: Dict[str, str] = {}
        if self._auth_token:
            params["auth"] = self._auth_token
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.request(
                    method, self._url(path), params=params, headers=headers, **kwargs
                )
        except httpx.TimeoutException as exc:
            logger.exception("%s %s timed out", method, path)
            raise StoreUnavailable(
                f"Request to the ledger store timed out ({method} {path})", path=path
            ) from exc
        except httpx.HTTPError as exc:
            logger.exception("%s %s failed", method, path)
            raise StoreUnavailable(
                f"Ledger store request failed ({method} {path}): {exc}", path=path
            ) from exc
        if resp.status_code == 412 and allow_precondition_failed:
            return resp
        if resp.status_code not in (200, 204):
            logger.error(
                "%s %s returned %s: %s", method, path, resp.status_code, resp.text
            )
            raise StoreUnavailable(
                f"Ledger store rejected {method} {path} with {resp.status_code}",
                path=path,
                status_code=resp.status_code,
            )
        return resp

    async def read(self, path: str) -> Optional[Any]:
        resp = await self._request("GET", path)
        return resp.json()

    async def write(self, path: str, value: Any) -> None:
        await self._request("PUT", path, json=encode_value(value))

    async def delete(self, path: str) -> None:
        await self._request("DELETE", path)

    async def write_if_absent(self, path: str, value: Any) -> bool:
        resp = await self._request("GET", path, headers={"X-Firebase-ETag": "true"})
        if resp.json() is not None:
            return False
        etag = resp.headers.get("ETag")
        if not etag:
            return await super().write_if_absent(path, value)
        resp = await self._request(
            "PUT",
            path,
            json=encode_value(value),
            headers={"if-match": etag},
            allow_precondition_failed=True,
        )
        if resp.status_code == 412:
            logger.info("%s was created concurrently; keeping existing value", path)
            return False
        return True


def create_firebase_store(*, settings: Settings) -> LedgerStore:
    """Create a Firebase-backed store without relying on FastAPI wiring."""
    return FirebaseLedgerStore(settings=settings)
