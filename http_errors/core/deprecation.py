# http_errors/core/deprecation.py
"""
Deprecation sink used by the factory for soft warnings.

A sink is any callable taking the warning text. The default one goes
through the warnings module so applications control it with the usual
filters; factories can be given their own sink instead.
"""

from __future__ import annotations

from typing import Callable
import warnings

DeprecationSink = Callable[[str], None]

NON_ERROR_STATUS_MESSAGE = "non-error status code; use only 4xx or 5xx status codes"


def warn_deprecated(message: str) -> None:
    # warn_deprecated -> _resolve_status -> __call__ -> caller
    warnings.warn(message, DeprecationWarning, stacklevel=4)


def silent_sink(message: str) -> None:
    return None


__all__ = [
    "DeprecationSink",
    "NON_ERROR_STATUS_MESSAGE",
    "warn_deprecated",
    "silent_sink",
]
