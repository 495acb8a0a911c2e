# http_errors/core/errors/__init__.py
"""
Usage error types for http_errors.

This package defines the exceptions raised when the factory, the variant
constructors, the pool or the configuration are misused. They are distinct
from the HTTP error values the factory produces.

No side effects on import.
"""

from . import codes
from .exceptions import (
    HttpErrorsUsageError,
    UnsupportedArgumentError,
    AbstractClassError,
    ErrorAlreadyReleasedError,
    ConfigError,
)

__all__ = [
    "codes",
    "HttpErrorsUsageError",
    "UnsupportedArgumentError",
    "AbstractClassError",
    "ErrorAlreadyReleasedError",
    "ConfigError",
]
