# http_errors/core/stack.py
"""
Lazy stack capture for HTTP error instances.

Formatting a call stack is the expensive part of building an error, and most
HTTP errors are only ever inspected for their status. LazyStack defers the
capture until `stack` is first read:

- first read: capture, store in the instance __dict__, return
- later reads: served straight from the instance __dict__ (non-data descriptor,
  so the descriptor is no longer consulted)
- assignment before any read: stored as-is, capture never happens
- `del err.__dict__["stack"]` (what the pool does): back to on-demand capture
"""

from __future__ import annotations

import os
import traceback
from typing import Any, List, Optional


# Frames from inside this package never appear in captured stacks
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _is_internal(filename: str) -> bool:
    return os.path.abspath(filename).startswith(_PACKAGE_DIR + os.sep)


def _header(error: BaseException) -> str:
    name = getattr(error, "name", None) or type(error).__name__
    message = getattr(error, "message", None)
    if message is None:
        message = str(error)
    return f"{name}: {message}" if message else str(name)


def capture_stack(error: BaseException) -> str:
    """
    Format the current call context for error.

    The first line is "<name>: <message>", followed by the frames of the
    caller, innermost last, without frames from http_errors itself.
    """
    frames: List[traceback.FrameSummary] = [
        frame for frame in traceback.extract_stack()
        if not _is_internal(frame.filename)
    ]
    return _header(error) + "\n" + "".join(traceback.format_list(frames))


class LazyStack:
    """
    Non-data descriptor computing `stack` on first access.

    Works like functools.cached_property but resolves capture_stack at call
    time, so the capture routine can be swapped in tests.
    """

    attr_name = "stack"

    def __set_name__(self, owner: type, name: str) -> None:
        self.attr_name = name

    def __get__(self, instance: Optional[Any], owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        value = capture_stack(instance)
        instance.__dict__[self.attr_name] = value
        return value


def is_captured(error: BaseException) -> bool:
    """True once `stack` holds a stored value (captured or assigned)"""
    return "stack" in getattr(error, "__dict__", {})


def reset_stack(error: BaseException) -> None:
    """Drop a stored stack so the next read captures again"""
    error.__dict__.pop("stack", None)


__all__ = [
    "LazyStack",
    "capture_stack",
    "is_captured",
    "reset_stack",
]
