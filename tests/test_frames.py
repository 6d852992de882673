from __future__ import annotations

import asyncio
import re

import pytest

from stackcapturer.core import StackCapturer, capture_stack, is_boundary_frame, process_stack

INTERNAL_1 = 'File "/usr/lib/python3.12/asyncio/base_events.py", line 456, in create_task'
INTERNAL_2 = 'File "/usr/lib/python3.12/asyncio/tasks.py", line 420, in create_task'


def _raw(*frames: str) -> str:
    return "\n".join(["Stack", *(f"    {frame}  " for frame in frames)])


def test_process_stack_removes_frames_up_to_last_asyncio_frame(raw_stack: str) -> None:
    processed = StackCapturer.for_all_events().process_stack(raw_stack)

    assert processed == [
        'File "/srv/app/worker.py", line 12, in spawn_worker',
        'File "/srv/app/main.py", line 30, in main',
        'File "/usr/lib/python3.12/asyncio/events.py", line 88, in _run',
        'File "/usr/lib/python3.12/asyncio/base_events.py", line 1986, in _run_once',
    ]


def test_process_stack_is_idempotent(raw_stack: str) -> None:
    capturer = StackCapturer.for_all_events()
    processed = capturer.process_stack(raw_stack)

    assert capturer.process_stack(processed) is processed
    assert capturer.process_stack(processed) == processed


def test_process_stack_returns_sequences_unmodified() -> None:
    frames = ("a", INTERNAL_1, "b")
    assert process_stack(frames) is frames


def test_process_stack_keeps_suffix_after_boundary_run() -> None:
    processed = process_stack(_raw("A", "B", INTERNAL_1, INTERNAL_2, "C", "D"))
    assert processed == ["C", "D"]


def test_process_stack_without_boundary_keeps_everything() -> None:
    processed = process_stack(_raw("A", "B", "C"))
    assert processed == ["A", "B", "C"]


def test_process_stack_all_boundary_returns_nothing() -> None:
    assert process_stack(_raw(INTERNAL_1, INTERNAL_2)) == []


def test_process_stack_boundary_at_end_returns_nothing() -> None:
    assert process_stack(_raw("A", "B", INTERNAL_1)) == []


def test_process_stack_only_skips_first_boundary_run() -> None:
    processed = process_stack(_raw("A", INTERNAL_1, "B", INTERNAL_2, "C"))
    assert processed == ["B", INTERNAL_2, "C"]


def test_process_stack_degenerate_input() -> None:
    assert process_stack("") == []
    assert process_stack("Stack") == []


def test_process_stack_with_custom_boundary() -> None:
    capturer = StackCapturer(events={"init"}, boundary_pattern=re.compile(r"[\\/]mytracer[\\/]"))
    stack = _raw(
        'File "/srv/mytracer/collector.py", line 3, in on_init',
        'File "/srv/mytracer/hooks.py", line 9, in emit',
        INTERNAL_1,
        'File "/srv/app/worker.py", line 12, in spawn_worker',
    )

    assert capturer.process_stack(stack) == [INTERNAL_1, 'File "/srv/app/worker.py", line 12, in spawn_worker']


def test_is_boundary_frame() -> None:
    assert is_boundary_frame(INTERNAL_1)
    assert is_boundary_frame('File "C:\\Python312\\Lib\\asyncio\\events.py", line 88, in _run')
    assert not is_boundary_frame('File "/srv/app/myasyncio/loop.py", line 1, in run')
    assert not is_boundary_frame("")


def test_capture_stack_lists_most_recent_call_first() -> None:
    def inner() -> str:
        return capture_stack()

    lines = inner().split("\n")

    assert lines[0] == "Stack"
    assert lines[1].strip().endswith("in inner")
    assert lines[2].strip().endswith("in test_capture_stack_lists_most_recent_call_first")
    assert all(line.startswith('    File "') for line in lines[1:])


def test_capture_stack_limit() -> None:
    lines = capture_stack(limit=1).split("\n")

    assert len(lines) == 2
    assert lines[1].strip().endswith("in test_capture_stack_limit")
    assert capture_stack(limit=0) == "Stack"


@pytest.mark.asyncio
async def test_task_factory_capture_points_at_task_creator() -> None:
    capturer = StackCapturer.for_all_events(types={"Task"})
    captured: list[list[str]] = []
    loop = asyncio.get_running_loop()

    def task_factory(loop: asyncio.AbstractEventLoop, coro, **kwargs):  # type: ignore[no-untyped-def]
        if capturer.should_capture_stack("init", "Task"):
            captured.append(capturer.process_stack(capturer.capture_stack()))
        return asyncio.Task(coro, loop=loop, **kwargs)

    async def work() -> int:
        return 1

    def spawn_worker() -> asyncio.Task[int]:
        return asyncio.create_task(work())

    loop.set_task_factory(task_factory)
    try:
        result = await spawn_worker()
    finally:
        loop.set_task_factory(None)

    assert result == 1
    assert len(captured) == 1
    assert captured[0][0].endswith("in spawn_worker")
    assert captured[0][1].endswith("in test_task_factory_capture_points_at_task_creator")
