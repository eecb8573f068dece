"""Ledger API integration tests."""

from __future__ import annotations

import httpx
import pytest

from tests.api.helpers import make_exercise_payload, make_food_payload, make_goals_payload
from tests.fakes import RecordingStore

pytestmark = pytest.mark.asyncio

DAY = "2024-05-01"


async def test_register_user(
    client: httpx.AsyncClient, auth_headers: dict[str, str], store: RecordingStore
) -> None:
    response = await client.post("/v1/users", headers=auth_headers)

    assert response.status_code == 201
    assert response.json() == {"status": "ok", "path": "users/alice", "created": True}

    again = await client.post("/v1/users", headers=auth_headers)
    assert again.json()["created"] is False
    assert await store.read("users/alice") == {}


async def test_ensure_date_is_idempotent(
    client: httpx.AsyncClient, auth_headers: dict[str, str], store: RecordingStore
) -> None:
    first = await client.put(f"/v1/dates/{DAY}", headers=auth_headers)
    second = await client.put(f"/v1/dates/{DAY}", headers=auth_headers)

    assert first.json() == {"status": "ok", "path": f"users/alice/{DAY}", "created": True}
    assert second.json()["created"] is False
    assert await store.read(f"users/alice/{DAY}") == {"food": {}, "exercises": {}}


async def test_food_round_trip(
    client: httpx.AsyncClient, auth_headers: dict[str, str]
) -> None:
    payload = make_food_payload()

    saved = await client.put(f"/v1/dates/{DAY}/food/Apple", json=payload, headers=auth_headers)
    listed = await client.get(f"/v1/dates/{DAY}/food", headers=auth_headers)

    assert saved.status_code == 200
    assert saved.json() == {"name": "Apple", "attributes": payload}
    assert listed.json() == [{"name": "Apple", "attributes": payload}]


async def test_food_delete(
    client: httpx.AsyncClient, auth_headers: dict[str, str]
) -> None:
    await client.put(f"/v1/dates/{DAY}/food/Apple", json=make_food_payload(), headers=auth_headers)

    deleted = await client.delete(f"/v1/dates/{DAY}/food/Apple", headers=auth_headers)
    missing = await client.delete(f"/v1/dates/{DAY}/food/Apple", headers=auth_headers)
    listed = await client.get(f"/v1/dates/{DAY}/food", headers=auth_headers)

    assert deleted.json() == {"status": "ok", "path": f"users/alice/{DAY}/food/Apple"}
    assert missing.status_code == 200
    assert listed.json() == []


async def test_exercise_routes(
    client: httpx.AsyncClient, auth_headers: dict[str, str], store: RecordingStore
) -> None:
    payload = make_exercise_payload(Weight="62.5")

    await client.put(f"/v1/dates/{DAY}/exercises/Deadlift", json=payload, headers=auth_headers)
    listed = await client.get(f"/v1/dates/{DAY}/exercises", headers=auth_headers)

    assert listed.json() == [{"name": "Deadlift", "attributes": payload}]
    assert await store.read(f"users/alice/{DAY}/food") == {}

    await client.delete(f"/v1/dates/{DAY}/exercises/Deadlift", headers=auth_headers)
    assert (await client.get(f"/v1/dates/{DAY}/exercises", headers=auth_headers)).json() == []


async def test_invalid_entry_values_are_rejected(
    client: httpx.AsyncClient, auth_headers: dict[str, str], store: RecordingStore
) -> None:
    response = await client.put(
        f"/v1/dates/{DAY}/food/Apple",
        json=make_food_payload(Calories="ninety"),
        headers=auth_headers,
    )

    assert response.status_code == 422
    assert store.calls_to("write") == []


async def test_invalid_date_is_rejected(
    client: httpx.AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get("/v1/dates/2024-13-01/food", headers=auth_headers)

    assert response.status_code == 422
    assert "YYYY-MM-DD" in response.json()["detail"]["error"]


async def test_recorded_dates(
    client: httpx.AsyncClient, auth_headers: dict[str, str]
) -> None:
    for day in ("2024-05-02", DAY):
        await client.put(f"/v1/dates/{day}", headers=auth_headers)
    await client.put("/v1/goals", json=make_goals_payload(), headers=auth_headers)

    response = await client.get("/v1/dates", headers=auth_headers)

    assert response.json() == {"user": "alice", "dates": [DAY, "2024-05-02"]}


async def test_goals_round_trip(
    client: httpx.AsyncClient, auth_headers: dict[str, str]
) -> None:
    empty = await client.get("/v1/goals", headers=auth_headers)
    saved = await client.put("/v1/goals", json=make_goals_payload(), headers=auth_headers)
    fetched = await client.get("/v1/goals", headers=auth_headers)

    assert empty.json() == {"goals": None}
    assert saved.status_code == 200
    assert fetched.json() == {
        "goals": {"calories": 2000.0, "protein": 120.0, "carbs": 250.0, "fats": 70.0}
    }


async def test_goals_must_be_positive(
    client: httpx.AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.put(
        "/v1/goals", json=make_goals_payload(calories=0), headers=auth_headers
    )

    assert response.status_code == 422


async def test_daily_progress(
    client: httpx.AsyncClient, auth_headers: dict[str, str]
) -> None:
    await client.put("/v1/goals", json=make_goals_payload(calories=1000), headers=auth_headers)
    await client.put(
        f"/v1/dates/{DAY}/food/Lunch", json=make_food_payload(Calories="500"), headers=auth_headers
    )
    await client.put(
        f"/v1/dates/{DAY}/food/Dinner", json=make_food_payload(Calories="700"), headers=auth_headers
    )

    response = await client.get(f"/v1/dates/{DAY}/progress", headers=auth_headers)

    data = response.json()
    assert response.status_code == 200
    assert data["has_goals"] is True
    assert data["calories"] == {
        "current": 1200.0,
        "display_current": 1000.0,
        "goal": 1000.0,
        "ratio": 1.0,
    }
    assert data["carbs"]["current"] == 50.0


async def test_store_outage_maps_to_503(
    client: httpx.AsyncClient, auth_headers: dict[str, str], store: RecordingStore
) -> None:
    store.fail_on("read")

    response = await client.get(f"/v1/dates/{DAY}/food", headers=auth_headers)

    assert response.status_code == 503
    assert response.json()["detail"]["error"] == "Ledger store unavailable"


async def test_legacy_goals_with_blank_target(
    client: httpx.AsyncClient, auth_headers: dict[str, str], store: RecordingStore
) -> None:
    await store.write("users/alice/Goals", {"calories": 1000, "protein": 0, "carbs": 200, "fats": 50})
    await client.put(
        f"/v1/dates/{DAY}/food/Lunch", json=make_food_payload(Calories="500"), headers=auth_headers
    )

    goals = await client.get("/v1/goals", headers=auth_headers)
    progress = await client.get(f"/v1/dates/{DAY}/progress", headers=auth_headers)

    assert goals.json() == {
        "goals": {"calories": 1000.0, "protein": None, "carbs": 200.0, "fats": 50.0}
    }
    data = progress.json()
    assert data["has_goals"] is True
    assert data["calories"]["ratio"] == 0.5
    assert data["protein"]["goal"] is None
