"""StackCapturer — decides when to capture a stack and trims captured stacks."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Any

from ..exceptions import InvalidConfigError
from ..models import ALL_EVENTS, ProcessedStack
from . import frames
from .capture_config import CaptureConfig
from .predicates import evaluate, never_capture


class StackCapturer:
    """Owns an immutable CaptureConfig, resolved once into a capture rule.

    Error-handling contract
    ----------------------
    - Configuration errors (conflicting modes, missing events, non-set events
      or types, non-callable ``should_capture``) raise immediately, these are
      programming errors the caller should fix.
    - ``should_capture_stack`` and ``process_stack`` never raise on their
      own. A custom ``should_capture`` is trusted: its result is returned as
      is and its exceptions propagate to the caller.
    """

    __slots__ = ("config", "_rule")

    def __init__(
        self,
        config: CaptureConfig | None = None,
        *,
        events: set[str] | frozenset[str] | None = None,
        types: set[str] | frozenset[str] | None = None,
        should_capture: Callable[..., Any] | None = None,
        boundary_pattern: str | re.Pattern[str] | None = None,
    ) -> None:
        options: dict[str, Any] = {
            "events": events,
            "types": types,
            "should_capture": should_capture,
        }
        if boundary_pattern is not None:
            options["boundary_pattern"] = boundary_pattern

        if config is None:
            config = CaptureConfig(**options)
        elif any(value is not None for value in options.values()):
            raise InvalidConfigError("Pass either a CaptureConfig or capture options, not both")

        self.config = config
        self._rule = config.rule()

    def should_capture_stack(
        self,
        event: str,
        resource_type: str | None = None,
        activity: object | None = None,
    ) -> bool:
        """Return whether a stack should be captured for this event and resource type."""
        return evaluate(self._rule, event, resource_type, activity)

    def capture_stack(self) -> str:
        """Capture the current stack as raw text."""
        return frames.capture_stack()

    def process_stack(self, stack: str | Sequence[str]) -> ProcessedStack:
        """Split a captured stack into lines without the asyncio frames that led here."""
        return frames.process_stack(stack, self.config.boundary_pattern)

    @classmethod
    def for_all_events(cls, types: set[str] | frozenset[str] | None = None) -> StackCapturer:
        """Create a StackCapturer that captures init, before, after and destroy for ``types``."""
        return cls(events=set(ALL_EVENTS), types=types)

    @classmethod
    def turned_off(cls) -> StackCapturer:
        """Create a StackCapturer that never captures."""
        return cls(should_capture=never_capture)

    def __repr__(self) -> str:
        return f"StackCapturer({self._rule!r})"
