"""stackcapturer — capture decisions and stack trimming for async tracing tools.

Convenience API (delegates to a default StackCapturer, turned off until configured):
    stackcapturer.configure(...)              -> set up the default capturer
    stackcapturer.should_capture_stack(...)   -> ask whether to capture for an event
    stackcapturer.capture_stack()             -> raw stack text
    stackcapturer.process_stack(...)          -> trimmed frame lines

DI API (construct your own StackCapturer):
    from stackcapturer.core import CaptureConfig, StackCapturer
    capturer = StackCapturer(CaptureConfig(events={"init"}, types={"Task"}))
    if capturer.should_capture_stack("init", "Task"):
        frames = capturer.process_stack(capturer.capture_stack())
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Any

from .core import ASYNCIO_BOUNDARY, CaptureConfig, CapturePredicate, StackCapturer, never_capture
from .exceptions import (
    ConflictingModeError,
    InvalidConfigError,
    InvalidPredicateError,
    MissingRuleError,
    NotASetError,
    StackCapturerError,
)
from .models import ALL_EVENTS, LifecycleEvent, ProcessedStack

_default_capturer: StackCapturer | None = None


def configure(
    *,
    events: set[str] | frozenset[str] | None = None,
    types: set[str] | frozenset[str] | None = None,
    should_capture: Callable[..., Any] | None = None,
    boundary_pattern: str | re.Pattern[str] | None = None,
) -> StackCapturer:
    """Configure and return the default global StackCapturer instance."""
    global _default_capturer
    _default_capturer = StackCapturer(
        events=events,
        types=types,
        should_capture=should_capture,
        boundary_pattern=boundary_pattern,
    )
    return _default_capturer


def get_capturer() -> StackCapturer:
    global _default_capturer
    if _default_capturer is None:
        _default_capturer = StackCapturer.turned_off()
    return _default_capturer


def should_capture_stack(
    event: str,
    resource_type: str | None = None,
    activity: object | None = None,
) -> bool:
    return get_capturer().should_capture_stack(event, resource_type, activity)


def capture_stack() -> str:
    return get_capturer().capture_stack()


def process_stack(stack: str | Sequence[str]) -> ProcessedStack:
    return get_capturer().process_stack(stack)


def _reset_default_capturer() -> None:
    """Reset the default capturer. Used by test fixtures."""
    global _default_capturer
    _default_capturer = None


__all__ = [
    "ALL_EVENTS",
    "ASYNCIO_BOUNDARY",
    "CaptureConfig",
    "CapturePredicate",
    "ConflictingModeError",
    "InvalidConfigError",
    "InvalidPredicateError",
    "LifecycleEvent",
    "MissingRuleError",
    "NotASetError",
    "ProcessedStack",
    "StackCapturer",
    "StackCapturerError",
    "capture_stack",
    "configure",
    "get_capturer",
    "never_capture",
    "process_stack",
    "should_capture_stack",
]
