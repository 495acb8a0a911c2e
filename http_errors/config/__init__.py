"""
http_errors Configuration

Design principles:
1. Code defaults are complete; YAML is optional input
2. Sections are frozen dataclasses
3. Validation reports issues, ErrorFactory decides what is fatal
"""

from .sections import Section, PoolConfig, StackConfig, DeprecationConfig
from .loader import DEFAULT_CONFIG_PATH, HttpErrorsConfig, load_config
from .validator import ConfigIssue, validate_config

__all__ = [
    # Sections
    "Section",
    "PoolConfig",
    "StackConfig",
    "DeprecationConfig",

    # Unified config
    "DEFAULT_CONFIG_PATH",
    "HttpErrorsConfig",
    "load_config",

    # Validator
    "ConfigIssue",
    "validate_config",
]
