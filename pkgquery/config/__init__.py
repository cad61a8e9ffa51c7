"""Configuration module for pkgquery.

This module provides YAML configuration parsing and validation for pkgquery.yaml.
"""

from pkgquery.config.parser import (
    CacheConfig,
    CommandConfig,
    ManagersConfig,
    PkgQueryConfig,
    ConfigError,
    load_config,
    parse_config,
)

__all__ = [
    "CacheConfig",
    "CommandConfig",
    "ManagersConfig",
    "PkgQueryConfig",
    "ConfigError",
    "load_config",
    "parse_config",
]
