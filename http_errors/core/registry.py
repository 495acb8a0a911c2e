# http_errors/core/registry.py
"""
Type Registry: one generated exception class per 4xx/5xx status.

The registry provides:
- Lookup by numeric code (registry[404])
- Lookup by identifier or class name (registry["NotFound"], registry["NotFoundError"])
- Code-class fallback resolution (resolve(499) -> BadRequestError)
- Reason phrases for any status the status registry knows

Design principles:
- Built once from a StatusRegistry, read-only afterwards
- The default registry is a lazily initialized global guarded by a lock
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Union
import logging
import threading

from .statuses import StatusRegistry
from .variants import ErrorVariant, build_variant_class, code_class

logger = logging.getLogger(__name__)

RegistryKey = Union[int, str]


class TypeRegistry:
    """
    Immutable index of generated HTTP error classes.

    Usage:
    ```python
    registry = build_type_registry(StatusRegistry.default())

    NotFound = registry[404]
    assert registry["NotFound"] is NotFound
    assert registry.resolve(499) is registry[400]
    ```
    """

    def __init__(self, statuses: StatusRegistry, classes: Dict[int, type]):
        self._statuses = statuses
        self._by_code: Dict[int, type] = dict(classes)

        by_name: Dict[str, type] = {}
        for cls in self._by_code.values():
            variant: ErrorVariant = cls.variant
            by_name[variant.identifier] = cls
            by_name.setdefault(variant.class_name, cls)
        self._by_name = MappingProxyType(by_name)

    @property
    def statuses(self) -> StatusRegistry:
        return self._statuses

    def get(self, key: RegistryKey) -> Optional[type]:
        """
        Get a variant class by code or name.

        Args:
            key: Status code (404) or name ("NotFound" / "NotFoundError")

        Returns:
            The variant class, or None if not registered
        """
        if isinstance(key, str):
            return self._by_name.get(key)
        return self._by_code.get(key)

    def resolve(self, status: int) -> Optional[type]:
        """
        Variant class for status, falling back to its code class.

        Returns:
            Exact variant, else the x00 variant, else None
        """
        cls = self._by_code.get(status)
        if cls is None:
            cls = self._by_code.get(code_class(status))
        return cls

    def variant(self, code: int) -> Optional[ErrorVariant]:
        cls = self._by_code.get(code)
        return cls.variant if cls is not None else None

    def message_for(self, status: int) -> Optional[str]:
        """Reason phrase for status (covers non-error codes too)"""
        return self._statuses.message(status)

    def codes(self) -> List[int]:
        return sorted(self._by_code)

    def names(self) -> List[str]:
        return sorted(self._by_name)

    def __getitem__(self, key: RegistryKey) -> type:
        cls = self.get(key)
        if cls is None:
            raise KeyError(key)
        return cls

    def __contains__(self, key: object) -> bool:
        if isinstance(key, (int, str)):
            return self.get(key) is not None
        return False

    def __iter__(self) -> Iterator[type]:
        return (self._by_code[code] for code in self.codes())

    def __len__(self) -> int:
        return len(self._by_code)

    def __repr__(self) -> str:
        return f"TypeRegistry(variants={len(self._by_code)})"


def build_type_registry(
    statuses: Optional[StatusRegistry] = None,
    module: str = "http_errors",
) -> TypeRegistry:
    """
    Generate a variant class for every 4xx/5xx code in statuses.

    Codes in other classes are skipped; they stay usable as plain statuses.

    Args:
        statuses: Status registry (defaults to HTTPStatus)
        module: __module__ assigned to generated classes
    """
    if statuses is None:
        statuses = StatusRegistry.default()

    classes: Dict[int, type] = {}
    for code in statuses.codes():
        variant = ErrorVariant.from_phrase(code, statuses.message(code))
        if variant is None:
            continue
        classes[code] = build_variant_class(variant, module=module)

    registry = TypeRegistry(statuses, classes)
    logger.debug("Built type registry with %d error variants", len(registry))
    return registry


# Global registry instance
_global_registry: Optional[TypeRegistry] = None
_global_registry_lock = threading.Lock()


def get_type_registry() -> TypeRegistry:
    """
    Get the default type registry.

    Built from HTTPStatus on first access, exactly once per process.
    """
    global _global_registry

    if _global_registry is None:
        with _global_registry_lock:
            if _global_registry is None:
                _global_registry = build_type_registry()

    return _global_registry


__all__ = [
    "RegistryKey",
    "TypeRegistry",
    "build_type_registry",
    "get_type_registry",
]
