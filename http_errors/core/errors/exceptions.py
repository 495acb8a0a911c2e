# http_errors/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from . import codes


@dataclass(eq=False)
class HttpErrorsUsageError(TypeError):
    """
    Raised when the package itself is used incorrectly.

    These are never produced as HTTP error values; they fail the calling code.
    """
    message: str
    error_code: str = codes.USAGE_ERROR
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class UnsupportedArgumentError(HttpErrorsUsageError):
    """create_error() received an argument it cannot classify"""

    def __init__(self, index: int, value: Any) -> None:
        self.index = index
        self.arg_type = type(value).__name__
        super().__init__(
            message=f"argument #{index + 1} unsupported type {self.arg_type}",
            error_code=codes.UNSUPPORTED_ARGUMENT,
            details={"index": index, "type": self.arg_type},
        )


class AbstractClassError(HttpErrorsUsageError):
    """Direct construction of HttpError or one of its kind bases"""

    def __init__(self, cls: type) -> None:
        super().__init__(
            message="cannot construct abstract class",
            error_code=codes.ABSTRACT_CLASS,
            details={"class": cls.__name__},
        )


class ErrorAlreadyReleasedError(HttpErrorsUsageError):
    """The same instance was released into a pool slot it already sits in"""

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(
            message=f"error instance already released to the {status} pool",
            error_code=codes.ALREADY_RELEASED,
            details={"status": status},
        )


class ConfigError(ValueError):
    """Configuration has error-level issues"""

    error_code = codes.INVALID_CONFIG

    def __init__(self, issues: List[Any]) -> None:
        self.issues = list(issues)
        lines = "; ".join(f"[{i.path}] {i.message}" for i in self.issues)
        super().__init__(f"invalid http_errors configuration: {lines}")


__all__ = [
    "HttpErrorsUsageError",
    "UnsupportedArgumentError",
    "AbstractClassError",
    "ErrorAlreadyReleasedError",
    "ConfigError",
]
