"""Shared vocabulary for capture decisions."""

from .event import ALL_EVENTS, LifecycleEvent, ProcessedStack

__all__ = ["ALL_EVENTS", "LifecycleEvent", "ProcessedStack"]
