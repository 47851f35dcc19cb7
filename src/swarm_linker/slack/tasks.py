"""Background task tracking for events received outside a request cycle.

Socket Mode deliveries have no FastAPI ``BackgroundTasks`` to hang work on, so
``EventTasks`` exposes the same ``add_task`` signature backed by asyncio tasks.
References are held until each task finishes and any exception is logged.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class TaskScheduler(Protocol):
    """Anything with FastAPI ``BackgroundTasks.add_task`` semantics."""

    def add_task(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None: ...


class EventTasks:
    """Run each scheduled coroutine function as an independent asyncio task."""

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task] = set()

    def add_task(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        task = asyncio.create_task(func(*args, **kwargs))
        self._tasks.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Event task failed: %s", exc, exc_info=exc)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def wait(self, timeout: float | None = None) -> None:
        """Wait for all in-flight tasks, cancelling any still running after ``timeout``."""
        if not self._tasks:
            return
        tasks = list(self._tasks)
        _, pending = await asyncio.wait(tasks, timeout=timeout)
        if pending:
            logger.warning("Cancelling %d event task(s) still running at shutdown", len(pending))
            for task in pending:
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
