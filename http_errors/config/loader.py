# http_errors/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

import yaml

from .sections import DeprecationConfig, PoolConfig, StackConfig
from .validator import ConfigIssue, validate_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".http_errors" / "config.yml"


class HttpErrorsConfig:
    """
    Unified http_errors configuration.

    All fields have code defaults - YAML is optional.
    """

    def __init__(
        self,
        pool: Optional[PoolConfig] = None,
        stack: Optional[StackConfig] = None,
        deprecation: Optional[DeprecationConfig] = None,
    ):
        self.pool = pool or PoolConfig()
        self.stack = stack or StackConfig()
        self.deprecation = deprecation or DeprecationConfig()

    @classmethod
    def default(cls) -> "HttpErrorsConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "HttpErrorsConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries ~/.http_errors/config.yml

        Returns:
            HttpErrorsConfig instance (always has code defaults as fallback)
        """
        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return cls.default()

        return cls(
            pool=_merge_section(PoolConfig, yaml_data.get("pool")),
            stack=_merge_section(StackConfig, yaml_data.get("stack")),
            deprecation=_merge_section(DeprecationConfig, yaml_data.get("deprecation")),
        )

    def validate(self) -> List[ConfigIssue]:
        return validate_config(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "pool": self.pool.to_dict(),
            "stack": self.stack.to_dict(),
            "deprecation": self.deprecation.to_dict(),
        }

    def __repr__(self) -> str:
        return f"HttpErrorsConfig({self.to_dict()})"


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.exists():
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not read config %s, using defaults: %s", path, e)
        return None

    if data is not None and not isinstance(data, dict):
        logger.warning("Config %s is not a mapping, using defaults", path)
        return None
    return data


def _merge_section(section_class, data: Optional[Dict[str, Any]]):
    if not isinstance(data, dict):
        return section_class()
    return section_class.from_dict(data)


def load_config(config_path: Optional[Path] = None) -> HttpErrorsConfig:
    """
    Load http_errors configuration.

    Args:
        config_path: Optional path to YAML file

    Returns:
        HttpErrorsConfig instance (always has code defaults)

    Note:
        - If YAML is not found or invalid, returns code defaults
        - Call validate() (or build an ErrorFactory) to check the result
    """
    return HttpErrorsConfig.from_yaml(config_path)


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "HttpErrorsConfig",
    "load_config",
]
