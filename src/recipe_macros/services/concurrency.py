"""Bounded fan-out for async lookups."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

T = TypeVar("T")


async def gather_bounded(
    factories: Sequence[Callable[[], Awaitable[T]]],
    limit: int = 6,
    *,
    return_exceptions: bool = False,
) -> list[T | BaseException]:
    """Run coroutine factories with at most ``limit`` in flight.

    Factories are admitted in submission order and results come back in the
    same order as ``factories``, regardless of completion order. A failure
    always frees its slot; with ``return_exceptions`` the exception is
    returned in place of the result, otherwise the first one is raised after
    the remaining tasks finish.
    """
    semaphore = asyncio.Semaphore(max(1, int(limit)))

    async def _run(factory: Callable[[], Awaitable[T]]) -> T:
        async with semaphore:
            return await factory()

    tasks = [asyncio.ensure_future(_run(factory)) for factory in factories]
    results = await asyncio.gather(*tasks, return_exceptions=True)
    if not return_exceptions:
        for result in results:
            if isinstance(result, BaseException):
                raise result
    return list(results)
