# http_errors/core/__init__.py
"""
Core components: status table, variants, registry, pool, stack capture, factory.

No side effects on import (the default registry is built on first use).
"""

from .statuses import StatusRegistry
from .variants import (
    ErrorKind,
    ErrorVariant,
    HttpError,
    ClientError,
    ServerError,
    build_variant_class,
    code_class,
    is_http_error,
)
from .registry import TypeRegistry, build_type_registry, get_type_registry
from .pool import ErrorPool, KEEP_ATTRIBUTES, DEFAULT_POOLED_STATUSES, DEFAULT_POOL_SIZE
from .stack import LazyStack, capture_stack
from .deprecation import DeprecationSink, warn_deprecated
from .factory import ErrorFactory, ResolvedArguments, resolve_arguments

__all__ = [
    "StatusRegistry",
    "ErrorKind",
    "ErrorVariant",
    "HttpError",
    "ClientError",
    "ServerError",
    "build_variant_class",
    "code_class",
    "is_http_error",
    "TypeRegistry",
    "build_type_registry",
    "get_type_registry",
    "ErrorPool",
    "KEEP_ATTRIBUTES",
    "DEFAULT_POOLED_STATUSES",
    "DEFAULT_POOL_SIZE",
    "LazyStack",
    "capture_stack",
    "DeprecationSink",
    "warn_deprecated",
    "ErrorFactory",
    "ResolvedArguments",
    "resolve_arguments",
]
