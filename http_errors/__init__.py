"""
http_errors - typed HTTP error values

User-facing API:
- create_error(): build an HTTP error from a status, message, properties or an
  existing exception
- create_error[404] / create_error["NotFound"]: the generated variant classes
- is_http_error(): does a value look like an HTTP error
- release_error(): hand an error back to the pool for reuse

Basic usage:

    >>> from http_errors import create_error
    >>> err = create_error(404)
    >>> err.status, err.status_code, err.expose, err.message
    (404, 404, True, 'Not Found')

    >>> err = create_error(403, "Members only", {"user_id": 7})
    >>> err.user_id
    7

Variant classes:

    >>> from http_errors import NotFoundError, HttpError
    >>> isinstance(NotFoundError("no such user"), HttpError)
    True

Adopting an exception:

    >>> err = create_error(ValueError("oops"))
    >>> err.status, err.expose
    (500, False)

Pooling (for hot paths that build many bare errors):

    >>> err = create_error(404)
    >>> release_error(err)
    True
    >>> create_error(404) is err
    True
"""

__version__ = "0.1.0"

from typing import Any

from .core import (
    ClientError,
    ErrorFactory,
    ErrorKind,
    ErrorPool,
    ErrorVariant,
    HttpError,
    ServerError,
    StatusRegistry,
    TypeRegistry,
    build_type_registry,
    get_type_registry,
    is_http_error,
)
from .core.errors import (
    AbstractClassError,
    ConfigError,
    ErrorAlreadyReleasedError,
    HttpErrorsUsageError,
    UnsupportedArgumentError,
)
from .config import (
    ConfigIssue,
    DeprecationConfig,
    HttpErrorsConfig,
    PoolConfig,
    StackConfig,
    load_config,
    validate_config,
)

# Default factory, built once at import
create_error = ErrorFactory()
release_error = create_error.release_error


def __getattr__(name: str) -> Any:
    # Variant classes: http_errors.NotFoundError, http_errors.NotFound
    cls = get_type_registry().get(name)
    if cls is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return cls


__all__ = [
    # Version
    "__version__",

    # User-facing API
    "create_error",
    "is_http_error",
    "release_error",

    # Types
    "HttpError",
    "ClientError",
    "ServerError",
    "ErrorKind",
    "ErrorVariant",

    # Components
    "ErrorFactory",
    "ErrorPool",
    "StatusRegistry",
    "TypeRegistry",
    "build_type_registry",
    "get_type_registry",

    # Usage errors
    "HttpErrorsUsageError",
    "UnsupportedArgumentError",
    "AbstractClassError",
    "ErrorAlreadyReleasedError",
    "ConfigError",

    # Configuration
    "HttpErrorsConfig",
    "PoolConfig",
    "StackConfig",
    "DeprecationConfig",
    "ConfigIssue",
    "load_config",
    "validate_config",
]
