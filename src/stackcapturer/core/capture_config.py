"""Configuration for a StackCapturer instance."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, model_validator

from ..exceptions import ConflictingModeError, InvalidPredicateError, MissingRuleError, NotASetError
from .frames import ASYNCIO_BOUNDARY
from .predicates import CapturePredicate, CaptureRule, CustomRule, EventRule

_SET_TYPES = (set, frozenset)


def _is_string_set(value: Any) -> bool:
    return isinstance(value, _SET_TYPES) and all(isinstance(item, str) for item in value)


class CaptureConfig(BaseModel):
    """Validated, immutable configuration for a StackCapturer.

    Either ``should_capture`` OR ``events`` (with optional ``types``) must be
    supplied. ``events`` and ``types`` must be sets of strings; ordered containers
    are rejected rather than converted.
    """

    model_config = ConfigDict(frozen=True)

    events: frozenset[str] | None = None
    types: frozenset[str] | None = None
    should_capture: Callable[..., Any] | None = None
    boundary_pattern: re.Pattern[str] = ASYNCIO_BOUNDARY

    @model_validator(mode="before")
    @classmethod
    def _check_mode(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        events = data.get("events")
        types = data.get("types")
        should_capture = data.get("should_capture")

        if should_capture is not None and not callable(should_capture):
            raise InvalidPredicateError("should_capture needs to be callable")

        if should_capture is not None:
            if events is not None or types is not None:
                raise ConflictingModeError(
                    "Only provide either events and types OR a should_capture function"
                )
        elif events is None:
            raise MissingRuleError("Need to supply a should_capture function or a set of events")
        elif not _is_string_set(events):
            raise NotASetError(f"events need to be a set of strings, got {events!r}")

        if types is not None and not _is_string_set(types):
            raise NotASetError(f"types need to be a set of strings, got {types!r}")

        return data

    def rule(self) -> CaptureRule:
        """Resolve the configured mode into a capture rule."""
        if self.should_capture is not None:
            return CustomRule(predicate=cast(CapturePredicate, self.should_capture))
        return EventRule(events=cast(frozenset[str], self.events), types=self.types)
