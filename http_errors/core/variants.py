# http_errors/core/variants.py
"""
Error variants: the descriptor records and the exception classes built from them.

Hierarchy:
    Exception
      └── HttpError            (abstract)
            ├── ClientError    (abstract, expose=True)
            │     └── NotFoundError, BadRequestError, ...
            └── ServerError    (abstract, expose=False)
                  └── InternalServerError, BadGatewayError, ...

Concrete classes are generated once per registry from ErrorVariant records.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Optional

from .errors import AbstractClassError
from .stack import LazyStack
from ..utils.identifiers import to_class_name, to_identifier


def code_class(status: int) -> int:
    """Leading digit of status times 100 (404 -> 400)"""
    return int(str(status)[0] + "00")


def is_status(value: Any) -> bool:
    """int but not bool"""
    return isinstance(value, int) and not isinstance(value, bool)


class ErrorKind(str, Enum):
    CLIENT = "client"
    SERVER = "server"

    @property
    def expose(self) -> bool:
        return self is ErrorKind.CLIENT

    @classmethod
    def for_status(cls, status: int) -> Optional["ErrorKind"]:
        """CLIENT for 4xx, SERVER for 5xx, None for anything else"""
        klass = code_class(status)
        if klass == 400:
            return cls.CLIENT
        if klass == 500:
            return cls.SERVER
        return None


@dataclass(frozen=True)
class ErrorVariant:
    """Immutable description of one 4xx/5xx error type"""
    code: int
    identifier: str
    class_name: str
    default_message: str
    kind: ErrorKind

    @property
    def expose(self) -> bool:
        return self.kind.expose

    @classmethod
    def from_phrase(cls, code: int, phrase: str) -> Optional["ErrorVariant"]:
        """Build a variant for code, or None when code is not 4xx/5xx"""
        kind = ErrorKind.for_status(code)
        if kind is None:
            return None
        identifier = to_identifier(phrase)
        return cls(
            code=code,
            identifier=identifier,
            class_name=to_class_name(identifier),
            default_message=phrase,
            kind=kind,
        )


class HttpError(Exception):
    """
    Abstract base of every generated HTTP error class.

    Only generated variant classes can be instantiated; HttpError, ClientError
    and ServerError raise AbstractClassError.
    """

    variant: ClassVar[Optional[ErrorVariant]] = None

    status: int
    status_code: int
    expose: bool
    name: str = "HttpError"

    stack = LazyStack()

    def __init__(self, message: Optional[str] = None) -> None:
        variant = type(self).variant
        if variant is None:
            raise AbstractClassError(type(self))
        msg = message if message is not None else variant.default_message
        super().__init__(msg)
        self.message = msg

    def __str__(self) -> str:
        return str(self.message)


class ClientError(HttpError):
    """Base of all 4xx variants"""
    expose = True
    name = "ClientError"


class ServerError(HttpError):
    """Base of all 5xx variants"""
    expose = False
    name = "ServerError"


def build_variant_class(variant: ErrorVariant, module: str = "http_errors") -> type:
    """Generate the exception class for variant"""
    base = ClientError if variant.kind is ErrorKind.CLIENT else ServerError
    return type(variant.class_name, (base,), {
        "__module__": module,
        "__qualname__": variant.class_name,
        "__doc__": f"{variant.code} {variant.default_message}",
        "variant": variant,
        "status": variant.code,
        "status_code": variant.code,
        "expose": variant.expose,
        "name": variant.class_name,
    })


def is_http_error(value: Any) -> bool:
    """
    True for values produced by http_errors, or compatible ones.

    HttpError instances always qualify. Other exceptions qualify when they
    carry a bool `expose` plus int `status` and `status_code` of equal value.
    """
    if not isinstance(value, BaseException):
        return False

    if isinstance(value, HttpError):
        return True

    status = getattr(value, "status", None)
    status_code = getattr(value, "status_code", None)
    return (
        isinstance(getattr(value, "expose", None), bool)
        and is_status(status)
        and is_status(status_code)
        and status == status_code
    )


__all__ = [
    "code_class",
    "is_status",
    "ErrorKind",
    "ErrorVariant",
    "HttpError",
    "ClientError",
    "ServerError",
    "build_variant_class",
    "is_http_error",
]
