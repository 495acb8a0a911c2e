# http_errors/core/factory.py
"""
Error Factory: turns loosely typed arguments into an HTTP error value.

    create_error(404)
    create_error(404, "No such user")
    create_error(403, {"user_id": 7})
    create_error(exc)                      # adopt an existing exception
    create_error(502, exc, "upstream down", {"upstream": "billing"})

Resolution happens in two steps: resolve_arguments() classifies the
arguments, then ErrorFactory either serves a pooled instance (fast path) or
builds/stamps one (slow path).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
import logging

from .deprecation import NON_ERROR_STATUS_MESSAGE, DeprecationSink, silent_sink, warn_deprecated
from .errors import ConfigError, UnsupportedArgumentError
from .pool import ErrorPool
from .registry import RegistryKey, TypeRegistry, get_type_registry
from . import stack
from .variants import HttpError, is_http_error, is_status
from ..config import HttpErrorsConfig

logger = logging.getLogger(__name__)

DEFAULT_STATUS = 500

# Never copied from a property mapping
PROTECTED_PROPERTIES = frozenset({"status", "status_code"})


@dataclass
class ResolvedArguments:
    """Outcome of classifying create_error() arguments"""
    status: Any = DEFAULT_STATUS
    error: Optional[BaseException] = None
    message: Optional[str] = None
    props: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_bare(self) -> bool:
        """No adopted error, message or properties: eligible for the pool"""
        return self.error is None and self.message is None and not self.props


def resolve_arguments(args: Tuple[Any, ...]) -> ResolvedArguments:
    """
    Classify create_error() arguments.

    - exception       -> adopted; its status/status_code becomes the status
    - int at index 0  -> status (an integral float counts too)
    - str             -> message
    - mapping         -> merged into props (later keys win)
    - None            -> ignored

    Raises:
        UnsupportedArgumentError: any other argument
    """
    resolved = ResolvedArguments()

    for index, arg in enumerate(args):
        if isinstance(arg, BaseException):
            resolved.error = arg
            resolved.status = (
                getattr(arg, "status", None)
                or getattr(arg, "status_code", None)
                or resolved.status
            )
        elif arg is None:
            continue
        elif index == 0 and is_status(arg):
            resolved.status = arg
        elif index == 0 and isinstance(arg, float) and arg.is_integer():
            resolved.status = int(arg)
        elif isinstance(arg, str):
            resolved.message = arg
        elif isinstance(arg, Mapping):
            resolved.props.update((str(key), value) for key, value in arg.items())
        else:
            raise UnsupportedArgumentError(index, arg)

    return resolved


class ErrorFactory:
    """
    Callable HTTP error factory.

    Usage:
    ```python
    create_error = ErrorFactory()

    err = create_error(404)
    NotFound = create_error[404]          # also create_error["NotFound"]
    create_error.is_http_error(err)       # True
    create_error.release_error(err)       # back to the pool
    ```
    """

    HttpError = HttpError

    def __init__(
        self,
        registry: Optional[TypeRegistry] = None,
        pool: Optional[ErrorPool] = None,
        config: Optional[HttpErrorsConfig] = None,
        deprecation_sink: Optional[DeprecationSink] = None,
    ):
        """
        Args:
            registry: Type registry (defaults to the global one)
            pool: Error pool (defaults to one built from config.pool)
            config: Configuration (defaults to code defaults)
            deprecation_sink: Receives soft warnings (defaults to warnings.warn)

        Raises:
            ConfigError: config has error-level issues
        """
        self._config = config or HttpErrorsConfig.default()
        self._check_config(self._config)

        self._registry = registry if registry is not None else get_type_registry()
        self._pool = pool if pool is not None else ErrorPool(
            statuses=self._config.pool.statuses,
            capacity=self._config.pool.size,
        )
        if self._config.deprecation.enabled:
            self._deprecation_sink = deprecation_sink or warn_deprecated
        else:
            self._deprecation_sink = silent_sink

    @staticmethod
    def _check_config(config: HttpErrorsConfig) -> None:
        issues = config.validate()
        for issue in issues:
            if issue.level == "warn":
                logger.warning("http_errors config: %s", issue)
        errors = [issue for issue in issues if issue.level == "error"]
        if errors:
            raise ConfigError(errors)

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    @property
    def pool(self) -> ErrorPool:
        return self._pool

    @property
    def config(self) -> HttpErrorsConfig:
        return self._config

    def __call__(self, *args: Any) -> BaseException:
        resolved = resolve_arguments(args)
        status = self._resolve_status(resolved.status)

        if resolved.is_bare:
            pooled = self._pool.acquire(status)
            if pooled is not None:
                return pooled

        variant_cls = self._registry.resolve(status)
        err = resolved.error

        if err is None:
            err = self._construct(variant_cls, status, resolved.message)

        if (
            variant_cls is None
            or not isinstance(err, variant_cls)
            or getattr(err, "status", None) != status
        ):
            err.expose = status < 500
            err.status = err.status_code = status

        for key, value in resolved.props.items():
            if key not in PROTECTED_PROPERTIES:
                setattr(err, key, value)

        return err

    def _resolve_status(self, status: Any) -> int:
        if is_status(status) and not 400 <= status < 600:
            self._deprecation_sink(NON_ERROR_STATUS_MESSAGE)

        if not is_status(status) or (
            self._registry.message_for(status) is None
            and not 400 <= status < 600
        ):
            return DEFAULT_STATUS
        return status

    def _construct(
        self,
        variant_cls: Optional[type],
        status: int,
        message: Optional[str],
    ) -> BaseException:
        if variant_cls is not None:
            err = variant_cls(message)
            if not self._config.stack.lazy:
                err.stack = stack.capture_stack(err)
            return err

        msg = message or self._registry.message_for(status) or ""
        err = Exception(msg)
        err.message = msg
        err.name = "Error"
        err.stack = stack.capture_stack(err)
        return err

    def __getitem__(self, key: RegistryKey) -> type:
        """Variant class by code or name"""
        return self._registry[key]

    def __contains__(self, key: object) -> bool:
        return key in self._registry

    @staticmethod
    def is_http_error(value: Any) -> bool:
        return is_http_error(value)

    def release_error(self, err: BaseException) -> bool:
        """
        Return err to the pool for reuse.

        Only HttpError instances with a pooled status are kept; anything else
        is dropped. The instance is reset to the canonical shape for its
        status: custom attributes and message are discarded.

        Returns:
            True if the instance was pooled

        Raises:
            ErrorAlreadyReleasedError: err is already in the pool
        """
        status = getattr(err, "status_code", None) or getattr(err, "status", None)
        if not isinstance(err, HttpError):
            logger.debug("Dropping released %s: not an HttpError", type(err).__name__)
            return False
        return self._pool.release(err, status, self._registry.message_for(status))

    def __repr__(self) -> str:
        return f"ErrorFactory(registry={self._registry!r}, pool={self._pool!r})"


__all__ = [
    "DEFAULT_STATUS",
    "PROTECTED_PROPERTIES",
    "ResolvedArguments",
    "resolve_arguments",
    "ErrorFactory",
]
