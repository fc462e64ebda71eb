"""In-process background task runner.

Scans and removal runs execute as fire-and-forget asyncio tasks on the
server's event loop. Strong references are kept here until each task
finishes so that the loop does not garbage-collect a running task.
"""

import asyncio
from typing import Coroutine

from app.core.logging import get_logger

logger = get_logger(__name__)

_running: set[asyncio.Task] = set()


def spawn(coro: Coroutine, name: str) -> asyncio.Task:
    """Schedule a coroutine on the running loop and return immediately."""
    task = asyncio.get_running_loop().create_task(coro, name=name)
    _running.add(task)
    task.add_done_callback(_on_done)
    return task


def _on_done(task: asyncio.Task) -> None:
    _running.discard(task)
    if task.cancelled():
        logger.warning("background_task_cancelled", task=task.get_name())
        return

    exc = task.exception()
    if exc is not None:
        logger.error("background_task_failed", task=task.get_name(), error=repr(exc))


async def wait_for_background_tasks(timeout: float | None = None) -> None:
    """Wait until every spawned task has finished (or the timeout passes)."""
    loop = asyncio.get_running_loop()
    while True:
        pending = [task for task in _running if task.get_loop() is loop]
        if not pending:
            return
        _, not_done = await asyncio.wait(pending, timeout=timeout)
        if not_done:
            return


async def cancel_background_tasks() -> None:
    """Cancel all running tasks, used on application shutdown."""
    loop = asyncio.get_running_loop()
    pending = [task for task in _running if task.get_loop() is loop]
    for task in pending:
        task.cancel()
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)
