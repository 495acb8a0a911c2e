# http_errors/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Literal

from http_errors.core.variants import is_status

if TYPE_CHECKING:
    from .loader import HttpErrorsConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "pool.size"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(config: "HttpErrorsConfig") -> List[ConfigIssue]:
    """
    Validate configuration for illegal/misleading combinations.

    Returns:
        List of issues (warn/error level)
    """
    issues = []
    pool = config.pool

    if not is_status(pool.size) or pool.size < 0:
        issues.append(ConfigIssue(
            level="error",
            path="pool.size",
            message=f"size must be a non-negative integer, got {pool.size!r}",
        ))
    elif pool.size == 0 and pool.statuses:
        issues.append(ConfigIssue(
            level="warn",
            path="pool.size",
            message="size=0 disables reuse for every pooled status",
            hint="Set pool.statuses=[] to make this explicit",
        ))

    for status in pool.statuses:
        if not is_status(status) or not 400 <= status < 600:
            issues.append(ConfigIssue(
                level="error",
                path="pool.statuses",
                message=f"pooled status {status!r} is not a 4xx/5xx code",
            ))

    if len(set(pool.statuses)) != len(pool.statuses):
        issues.append(ConfigIssue(
            level="warn",
            path="pool.statuses",
            message="duplicate pooled statuses",
        ))

    return issues


__all__ = [
    "ConfigIssue",
    "validate_config",
]
