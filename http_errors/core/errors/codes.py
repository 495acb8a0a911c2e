# http_errors/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical usage error codes (stable public contract) ----
USAGE_ERROR: Final[str] = "USAGE_ERROR"

# factory
UNSUPPORTED_ARGUMENT: Final[str] = "UNSUPPORTED_ARGUMENT"

# variants
ABSTRACT_CLASS: Final[str] = "ABSTRACT_CLASS"

# pool
ALREADY_RELEASED: Final[str] = "ALREADY_RELEASED"

# config
INVALID_CONFIG: Final[str] = "INVALID_CONFIG"


# ---- semantic groups ----

FACTORY_CODES: Final[set[str]] = {
    UNSUPPORTED_ARGUMENT,
}

VARIANT_CODES: Final[set[str]] = {
    ABSTRACT_CLASS,
}

POOL_CODES: Final[set[str]] = {
    ALREADY_RELEASED,
}

CONFIG_CODES: Final[set[str]] = {
    INVALID_CONFIG,
}

ALL_CODES: Final[set[str]] = {
    USAGE_ERROR,
} | FACTORY_CODES | VARIANT_CODES | POOL_CODES | CONFIG_CODES
