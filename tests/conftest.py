"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from fitledger import main
from fitledger.application.bootstrap import DateBootstrapper
from fitledger.application.entries import EntryCollection, exercise_log, food_log
from fitledger.application.goals import GoalsStore
from fitledger.models.session import LedgerSession
from fitledger.settings import Settings, get_settings
from fitledger.wiring import get_ledger_store

from tests.fakes import RecordingStore

USER_EMAIL = "Alice.Smith@example.com"


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        api_key="test-key",
        firebase_database_url="https://ledger-test.firebaseio.com",
        firebase_auth_token="db-secret",
        store_backend="memory",
        store_timeout=5.0,
        default_timezone="UTC",
        usda_api_key="usda-key",
        usda_api_url="https://fdc.example.com/fdc/v1",
        usda_timeout=5.0,
    )


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def session() -> LedgerSession:
    return LedgerSession(email=USER_EMAIL, display_name="Alice Smith")


@pytest.fixture
def bootstrapper(store: RecordingStore) -> DateBootstrapper:
    return DateBootstrapper(store)


@pytest.fixture
def food(store: RecordingStore) -> EntryCollection:
    return food_log(store)


@pytest.fixture
def exercises(store: RecordingStore) -> EntryCollection:
    return exercise_log(store)


@pytest.fixture
def goals_store(store: RecordingStore) -> GoalsStore:
    return GoalsStore(store)


@pytest.fixture
def app(settings: Settings, store: RecordingStore) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        get_ledger_store: lambda: store,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as api_client:
        yield api_client


@pytest.fixture
def auth_headers(settings: Settings) -> dict[str, str]:
    return {
        "x-api-key": settings.api_key,
        "x-user-email": USER_EMAIL,
        "x-user-name": "Alice Smith",
    }
