# http_errors/core/statuses.py
"""
Status registry: the code -> reason phrase table.

Backed by http.HTTPStatus by default. A custom mapping can be supplied
(mostly for tests, or to add registry entries the interpreter lacks).
Read-only after construction.
"""

from __future__ import annotations

from http import HTTPStatus
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional


class StatusRegistry:
    """
    Read-only lookup of reason phrases by status code.

    Usage:
    ```python
    statuses = StatusRegistry.default()
    statuses.message(404)   # "Not Found"
    statuses.codes()        # [100, 101, ..., 511]
    ```
    """

    def __init__(self, phrases: Mapping[int, str]):
        self._phrases: Mapping[int, str] = MappingProxyType(dict(phrases))

    @classmethod
    def default(cls) -> "StatusRegistry":
        """Build the registry from the interpreter's HTTPStatus table"""
        phrases: Dict[int, str] = {}
        for status in HTTPStatus:
            phrases[int(status)] = status.phrase
        return cls(phrases)

    def message(self, code: int) -> Optional[str]:
        """Reason phrase for code, or None when the code is unknown"""
        return self._phrases.get(code)

    def codes(self) -> List[int]:
        """All known codes in ascending order"""
        return sorted(self._phrases)

    def __contains__(self, code: object) -> bool:
        return code in self._phrases

    def __iter__(self) -> Iterator[int]:
        return iter(self.codes())

    def __len__(self) -> int:
        return len(self._phrases)

    def __repr__(self) -> str:
        return f"StatusRegistry(codes={len(self._phrases)})"


__all__ = [
    "StatusRegistry",
]
