from __future__ import annotations

import stackcapturer


def reset_stackcapturer_config() -> None:
    """Reset the default capturer between tests."""
    stackcapturer._reset_default_capturer()


import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_config() -> None:
    reset_stackcapturer_config()


RAW_STACK = "\n".join(
    [
        "Stack",
        '    File "/srv/app/tracing/capturer.py", line 71, in capture_stack',
        '    File "/srv/app/tracing/collector.py", line 40, in _task_factory',
        '    File "/usr/lib/python3.12/asyncio/base_events.py", line 456, in create_task',
        '    File "/usr/lib/python3.12/asyncio/tasks.py", line 420, in create_task',
        '    File "/srv/app/worker.py", line 12, in spawn_worker',
        '    File "/srv/app/main.py", line 30, in main',
        '    File "/usr/lib/python3.12/asyncio/events.py", line 88, in _run',
        '    File "/usr/lib/python3.12/asyncio/base_events.py", line 1986, in _run_once',
    ]
)


@pytest.fixture
def raw_stack() -> str:
    return RAW_STACK
