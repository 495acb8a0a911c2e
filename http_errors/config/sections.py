# http_errors/config/sections.py
"""
Configuration sections.

Each section is a frozen dataclass with code defaults; YAML only overrides.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple

from http_errors.core.pool import DEFAULT_POOLED_STATUSES, DEFAULT_POOL_SIZE


@dataclass(frozen=True)
class Section:
    """Base for all configuration sections"""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, tuple):
                value = list(value)
            result[f.name] = value
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Section":
        """Build from a mapping, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass(frozen=True)
class PoolConfig(Section):
    """
    Object pool settings.

    size: max instances kept per status (0 disables reuse)
    statuses: statuses that get a pool slot
    """

    size: int = DEFAULT_POOL_SIZE
    statuses: Tuple[int, ...] = DEFAULT_POOLED_STATUSES

    def __post_init__(self) -> None:
        # YAML gives lists
        object.__setattr__(self, "statuses", tuple(self.statuses))


@dataclass(frozen=True)
class StackConfig(Section):
    """lazy=False captures the stack when the factory builds the error"""

    lazy: bool = True


@dataclass(frozen=True)
class DeprecationConfig(Section):
    """enabled=False keeps the factory from calling its deprecation sink"""

    enabled: bool = True
