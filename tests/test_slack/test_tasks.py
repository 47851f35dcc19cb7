"""Tests for asyncio-backed event task tracking."""

import asyncio
import logging

import pytest

from swarm_linker.slack.tasks import EventTasks


async def test_add_task_runs_coroutine():
    tasks = EventTasks()
    done: list[str] = []

    async def work(value: str, *, suffix: str) -> None:
        done.append(value + suffix)

    tasks.add_task(work, "a", suffix="!")
    await tasks.wait()

    assert done == ["a!"]
    assert tasks.pending == 0


async def test_tasks_run_independently():
    """A slow task does not block a later one from finishing."""
    tasks = EventTasks()
    gate = asyncio.Event()
    order: list[str] = []

    async def slow() -> None:
        await gate.wait()
        order.append("slow")

    async def fast() -> None:
        order.append("fast")
        gate.set()

    tasks.add_task(slow)
    tasks.add_task(fast)
    await tasks.wait()

    assert order == ["fast", "slow"]


async def test_failed_task_is_logged(caplog: pytest.LogCaptureFixture):
    """A task exception is logged instead of disappearing."""
    tasks = EventTasks()

    async def broken() -> None:
        raise RuntimeError("kaboom")

    with caplog.at_level(logging.ERROR, logger="swarm_linker.slack.tasks"):
        tasks.add_task(broken)
        await tasks.wait()
        await asyncio.sleep(0)

    assert "kaboom" in caplog.text
    assert tasks.pending == 0


async def test_wait_with_no_tasks():
    await EventTasks().wait()


async def test_wait_cancels_tasks_past_timeout():
    """A hung task is cancelled once the timeout elapses."""
    tasks = EventTasks()
    cancelled = asyncio.Event()

    async def hung() -> None:
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            cancelled.set()
            raise

    tasks.add_task(hung)
    await asyncio.wait_for(tasks.wait(timeout=0.05), timeout=1.0)

    assert cancelled.is_set()
    assert tasks.pending == 0
