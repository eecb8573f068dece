import asyncio

import pytest

from fitledger.application.sequencing import RequestSequencer


def test_only_latest_ticket_is_current() -> None:
    sequencer = RequestSequencer()
    first = sequencer.issue("food")
    second = sequencer.issue("food")
    other = sequencer.issue("goals")

    assert not sequencer.is_current("food", first)
    assert sequencer.is_current("food", second)
    assert sequencer.is_current("goals", other)


@pytest.mark.asyncio
async def test_slow_stale_fetch_is_flagged() -> None:
    sequencer = RequestSequencer()
    release_slow = asyncio.Event()

    async def slow_fetch() -> str:
        await release_slow.wait()
        return "old"

    async def fast_fetch() -> str:
        return "new"

    slow = asyncio.create_task(sequencer.run("food", slow_fetch()))
    await asyncio.sleep(0)
    fast_current, fast_result = await sequencer.run("food", fast_fetch())
    release_slow.set()
    slow_current, slow_result = await slow

    assert (fast_current, fast_result) == (True, "new")
    assert (slow_current, slow_result) == (False, "old")


@pytest.mark.asyncio
async def test_resolved_keys_are_forgotten() -> None:
    sequencer = RequestSequencer()

    async def fetch() -> str:
        return "entries"

    current, _ = await sequencer.run("2024-05-01", fetch())

    assert current
    assert sequencer._latest == {}


@pytest.mark.asyncio
async def test_failed_fetch_releases_its_key() -> None:
    sequencer = RequestSequencer()

    async def failing_fetch() -> str:
        raise RuntimeError("store down")

    with pytest.raises(RuntimeError):
        await sequencer.run("goals", failing_fetch())

    assert "goals" not in sequencer._latest
