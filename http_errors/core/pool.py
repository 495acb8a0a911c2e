# http_errors/core/pool.py
"""
Object pool for frequently produced HTTP errors.

One bounded LIFO stack per pooled status. Instances come back through an
explicit release (there is no reliable finalization hook to do it
automatically) and are reset to the canonical shape for their status before
being pushed.

Thread-safe: every slot has its own lock, so check-then-pop and
check-then-push are atomic.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Optional
import logging
import threading

from .errors import ErrorAlreadyReleasedError
from .stack import reset_stack

logger = logging.getLogger(__name__)

DEFAULT_POOLED_STATUSES = (400, 401, 403, 404, 500)
DEFAULT_POOL_SIZE = 10

# Attributes a pooled instance keeps; everything else is stripped on release
KEEP_ATTRIBUTES: FrozenSet[str] = frozenset({
    "status",
    "status_code",
    "expose",
    "message",
    "name",
})


def reset_instance(error: BaseException, message: Optional[str] = None) -> None:
    """
    Return error to its canonical shape.

    Strips custom attributes (including a stored stack), restores the default
    message when one is given, and drops exception chaining state.
    """
    state = error.__dict__
    for key in [k for k in state if k not in KEEP_ATTRIBUTES]:
        del state[key]

    if message is not None:
        error.message = message
        error.args = (message,)

    error.__traceback__ = None
    error.__cause__ = None
    error.__context__ = None
    error.__suppress_context__ = False


class ErrorPool:
    """
    Bounded per-status stacks of reusable error instances.

    Usage:
    ```python
    pool = ErrorPool(statuses=(404,), capacity=10)
    pool.release(err, 404, "Not Found")
    pooled = pool.acquire(404)   # same instance, canonical shape
    ```
    """

    def __init__(
        self,
        statuses: Iterable[int] = DEFAULT_POOLED_STATUSES,
        capacity: int = DEFAULT_POOL_SIZE,
    ):
        if capacity < 0:
            raise ValueError("pool capacity must be >= 0")
        self._capacity = capacity
        self._slots: Dict[int, List[BaseException]] = {}
        self._locks: Dict[int, threading.Lock] = {}
        for status in statuses:
            self._slots.setdefault(status, [])
            self._locks.setdefault(status, threading.Lock())

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def statuses(self) -> List[int]:
        return sorted(self._slots)

    def has_slot(self, status: object) -> bool:
        return status in self._slots

    def size(self, status: int) -> int:
        """Number of pooled instances for status (0 if unpooled)"""
        slot = self._slots.get(status)
        return len(slot) if slot is not None else 0

    def acquire(self, status: int) -> Optional[BaseException]:
        """
        Pop a pooled instance for status.

        The stored stack is dropped so it is captured again on next read.

        Returns:
            A previously released instance, or None if the slot is empty or
            the status is not pooled
        """
        slot = self._slots.get(status)
        if slot is None:
            return None

        with self._locks[status]:
            if not slot:
                return None
            error = slot.pop()

        reset_stack(error)
        return error

    def release(
        self,
        error: BaseException,
        status: int,
        message: Optional[str] = None,
    ) -> bool:
        """
        Push error back into the slot for status.

        Args:
            error: Instance to recycle
            status: Its effective status
            message: Canonical message to restore (default reason phrase)

        Returns:
            True if pooled, False if dropped (unpooled status or full slot)

        Raises:
            ErrorAlreadyReleasedError: error already sits in this slot
        """
        slot = self._slots.get(status)
        if slot is None:
            logger.debug("Dropping released error: status %s is not pooled", status)
            return False

        with self._locks[status]:
            if any(pooled is error for pooled in slot):
                raise ErrorAlreadyReleasedError(status)
            if len(slot) >= self._capacity:
                logger.debug("Dropping released error: %s pool is full", status)
                return False
            reset_instance(error, message)
            slot.append(error)

        return True

    def clear(self) -> None:
        """Empty every slot (useful for testing)"""
        for status, slot in self._slots.items():
            with self._locks[status]:
                slot.clear()

    def __repr__(self) -> str:
        sizes = {status: len(slot) for status, slot in self._slots.items()}
        return f"ErrorPool(capacity={self._capacity}, sizes={sizes})"


__all__ = [
    "DEFAULT_POOLED_STATUSES",
    "DEFAULT_POOL_SIZE",
    "KEEP_ATTRIBUTES",
    "ErrorPool",
    "reset_instance",
]
