"""Capture decisions and stack trimming."""

from .capture_config import CaptureConfig
from .capturer import StackCapturer
from .frames import ASYNCIO_BOUNDARY, capture_stack, is_boundary_frame, process_stack
from .predicates import CapturePredicate, CaptureRule, CustomRule, EventRule, evaluate, never_capture

__all__ = [
    "ASYNCIO_BOUNDARY",
    "CaptureConfig",
    "CapturePredicate",
    "CaptureRule",
    "CustomRule",
    "EventRule",
    "StackCapturer",
    "capture_stack",
    "evaluate",
    "is_boundary_frame",
    "never_capture",
    "process_stack",
]
