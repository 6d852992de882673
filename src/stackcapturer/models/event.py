"""Lifecycle events of a tracked asynchronous activity."""

from __future__ import annotations

from enum import StrEnum

ProcessedStack = list[str]


class LifecycleEvent(StrEnum):
    INIT = "init"
    BEFORE = "before"
    AFTER = "after"
    DESTROY = "destroy"


ALL_EVENTS: frozenset[str] = frozenset(event.value for event in LifecycleEvent)
