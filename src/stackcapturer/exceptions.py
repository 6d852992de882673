"""Public exception types for stackcapturer."""

from __future__ import annotations


class StackCapturerError(Exception):
    """Base class for all stackcapturer exceptions."""


class InvalidConfigError(StackCapturerError):
    """Raised when a capturer is configured with an unusable set of options."""


class ConflictingModeError(InvalidConfigError):
    """Raised when a ``should_capture`` override is combined with events or types."""


class MissingRuleError(InvalidConfigError):
    """Raised when neither a ``should_capture`` override nor events are supplied."""


class NotASetError(InvalidConfigError):
    """Raised when events or types are supplied as anything but a set."""


class InvalidPredicateError(InvalidConfigError):
    """Raised when the ``should_capture`` override is not callable."""
