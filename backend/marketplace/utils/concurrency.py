"""Fan-out/fan-in helper with a single error boundary."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any


async def gather_or_fail(*coros: Coroutine[Any, Any, Any]) -> list[Any]:
    """Run coroutines concurrently and return their results in argument order.

    The first failure cancels the tasks still running and is re-raised as
    the original exception (not wrapped in an ExceptionGroup), so callers
    handle it like the failure of a single await.
    """
    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(coro) for coro in coros]
    except BaseExceptionGroup as eg:
        raise eg.exceptions[0] from None
    return [task.result() for task in tasks]
