"""Tests for bounded task fan-out."""

import asyncio

import pytest

from recipe_macros.services.concurrency import gather_bounded


def test_results_keep_submission_order() -> None:
    async def work(value: int, delay: float) -> int:
        await asyncio.sleep(delay)
        return value

    factories = [
        lambda value=value: work(value, 0.01 * (5 - value)) for value in range(5)
    ]

    assert asyncio.run(gather_bounded(factories, limit=2)) == [0, 1, 2, 3, 4]


def test_limit_caps_active_tasks() -> None:
    active = 0
    peak = 0

    async def work() -> None:
        nonlocal active, peak
        active += 1
        peak = max(peak, active)
        await asyncio.sleep(0.01)
        active -= 1

    asyncio.run(gather_bounded([work for _ in range(8)], limit=3))

    assert peak == 3


def test_limit_below_one_runs_serially() -> None:
    active = 0
    peak = 0

    async def work() -> None:
        nonlocal active, peak
        active += 1
        peak = max(peak, active)
        await asyncio.sleep(0)
        active -= 1

    asyncio.run(gather_bounded([work, work, work], limit=0))

    assert peak == 1


def test_failure_propagates_after_all_finish() -> None:
    finished: list[int] = []

    async def ok(value: int) -> int:
        await asyncio.sleep(0.01)
        finished.append(value)
        return value

    async def boom() -> int:
        raise ValueError("lookup failed")

    with pytest.raises(ValueError, match="lookup failed"):
        asyncio.run(gather_bounded([lambda: ok(1), boom, lambda: ok(2)], limit=2))
    assert sorted(finished) == [1, 2]


def test_return_exceptions_keeps_positions() -> None:
    async def boom() -> int:
        raise ValueError("nope")

    async def ok() -> int:
        return 7

    results = asyncio.run(gather_bounded([ok, boom], return_exceptions=True))

    assert results[0] == 7
    assert isinstance(results[1], ValueError)
