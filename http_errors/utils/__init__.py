"""
Small shared helpers for http_errors. No side effects on import.
"""

from .identifiers import to_identifier, to_class_name

__all__ = [
    "to_identifier",
    "to_class_name",
]
