"""Fan-out/fan-in over independent coroutines."""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Iterable, List


async def gather_all(aws: Iterable[Awaitable[Any]], *, fail_fast: bool) -> List[Any]:
    """
    Run every awaitable concurrently and return results in input order.

    ``fail_fast=False``: wait for all of them; a failed slot holds its
    exception instead of a result.

    ``fail_fast=True``: on the first failure cancel whatever is still in
    flight and raise that failure unchanged. When several have already
    failed, the earliest in input order wins.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    if not tasks:
        return []

    if not fail_fast:
        return list(await asyncio.gather(*tasks, return_exceptions=True))

    try:
        _, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        await _cancel(tasks)
        raise

    if pending:
        await _cancel(pending)

    for task in tasks:
        if task.cancelled():
            continue
        exc = task.exception()
        if exc is not None:
            raise exc
    return [task.result() for task in tasks]


async def _cancel(tasks: Iterable[asyncio.Future]) -> None:
    tasks = list(tasks)
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)
