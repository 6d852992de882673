"""Raw stack acquisition and trimming of instrumentation frames."""

from __future__ import annotations

import re
import traceback
from collections.abc import Sequence

from ..models import ProcessedStack

STACK_HEADER = "Stack"

# Frames executed by the asyncio machinery that dispatches to collectors
# (task factories, Handle._run, the event loop itself).
ASYNCIO_BOUNDARY = re.compile(r"[\\/]asyncio[\\/]")


def is_boundary_frame(line: str, pattern: re.Pattern[str] = ASYNCIO_BOUNDARY) -> bool:
    return pattern.search(line) is not None


def capture_stack(limit: int | None = None) -> str:
    """Return the caller's stack as text, most recent call first.

    The first line is a ``Stack`` header, followed by one line per frame in
    the form ``File "<path>", line <n>, in <function>``. The frame of this
    function itself is not included.
    """
    frames = traceback.extract_stack()[:-1]
    if limit is not None:
        frames = frames[-limit:] if limit > 0 else []
    lines = [STACK_HEADER]
    for frame in reversed(frames):
        lines.append(f'    File "{frame.filename}", line {frame.lineno}, in {frame.name}')
    return "\n".join(lines)


def process_stack(
    stack: str | Sequence[str],
    pattern: re.Pattern[str] = ASYNCIO_BOUNDARY,
) -> ProcessedStack:
    """Trim a raw stack down to the frames that explain the application call.

    Already processed stacks (lists or tuples) are returned unmodified.
    Otherwise the header line is dropped and everything up to and including
    the first run of boundary frames is removed:

    - no boundary frame at all: every frame is kept
    - the boundary run reaches the end of the stack: nothing is kept
    """
    if not isinstance(stack, str):
        return stack  # type: ignore[return-value]

    lines = [line.strip() for line in stack.split("\n")[1:]]
    count = len(lines)
    index = 0
    while index < count and not is_boundary_frame(lines[index], pattern):
        index += 1
    if index == count:
        return lines

    while index < count and is_boundary_frame(lines[index], pattern):
        index += 1
    if index == count:
        return []

    return lines[index:]
