"""Record where tasks are created, using a task factory as the collector."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any

from stackcapturer import configure

capturer = configure(events={"init"}, types={"Task"})
creation_sites: dict[str, list[str]] = {}


def task_factory(
    loop: asyncio.AbstractEventLoop,
    coro: Coroutine[Any, Any, Any],
    **kwargs: Any,
) -> asyncio.Task[Any]:
    task = asyncio.Task(coro, loop=loop, **kwargs)
    if capturer.should_capture_stack("init", "Task", task):
        creation_sites[task.get_name()] = capturer.process_stack(capturer.capture_stack())
    return task


async def fetch(delay: float) -> float:
    await asyncio.sleep(delay)
    return delay


def schedule_fetches() -> list[asyncio.Task[float]]:
    return [asyncio.create_task(fetch(delay / 100)) for delay in range(3)]


async def main() -> None:
    asyncio.get_running_loop().set_task_factory(task_factory)
    await asyncio.gather(*schedule_fetches())

    for name, frames in creation_sites.items():
        print(name)
        for frame in frames[:3]:
            print(f"    {frame}")


if __name__ == "__main__":
    asyncio.run(main())
