# http_errors/utils/identifiers.py
"""
Identifier helpers for turning reason phrases into class names.

- to_identifier("Not Found")      -> "NotFound"
- to_identifier("I'm a Teapot")   -> "ImATeapot"
- to_class_name("NotFound")       -> "NotFoundError"
"""

from __future__ import annotations

import re


_NON_IDENTIFIER = re.compile(r"[^ _0-9a-z]", re.IGNORECASE)

ERROR_SUFFIX = "Error"


def to_identifier(phrase: str) -> str:
    """
    Convert a reason phrase into an identifier.

    Each space-separated token gets its first character upper-cased, tokens are
    joined, and anything outside [ _0-9a-zA-Z] is dropped.
    """
    tokens = phrase.split(" ")
    joined = "".join(token[:1].upper() + token[1:] for token in tokens)
    return _NON_IDENTIFIER.sub("", joined)


def to_class_name(identifier: str) -> str:
    """Append the Error suffix unless the identifier already carries it"""
    if identifier.endswith(ERROR_SUFFIX):
        return identifier
    return identifier + ERROR_SUFFIX


__all__ = [
    "ERROR_SUFFIX",
    "to_identifier",
    "to_class_name",
]
