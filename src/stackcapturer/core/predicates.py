"""Capture decision rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class CapturePredicate(Protocol):
    """Protocol for a custom capture decision.

    Receives the lifecycle event, the resource type and the activity handle
    (opaque, passed through untouched) and returns whether a stack should be
    captured. The result is trusted and returned to the caller as is.
    """

    def __call__(self, event: str, resource_type: str | None, activity: object | None = None) -> bool: ...


def never_capture(event: str, resource_type: str | None, activity: object | None = None) -> bool:
    return False


@dataclass(slots=True, frozen=True)
class EventRule:
    """Captures when the event, and the resource type if restricted, are listed."""

    events: frozenset[str]
    types: frozenset[str] | None = None

    def matches(self, event: str, resource_type: str | None) -> bool:
        if event not in self.events:
            return False
        if self.types is not None and resource_type not in self.types:
            return False
        return True


@dataclass(slots=True, frozen=True)
class CustomRule:
    """Delegates every decision to a caller-supplied predicate."""

    predicate: CapturePredicate


CaptureRule = EventRule | CustomRule


def evaluate(
    rule: CaptureRule,
    event: str,
    resource_type: str | None,
    activity: object | None = None,
) -> bool:
    match rule:
        case CustomRule(predicate=predicate):
            return predicate(event, resource_type, activity)
        case EventRule():
            return rule.matches(event, resource_type)
