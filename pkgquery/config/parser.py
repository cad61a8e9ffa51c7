"""YAML configuration parser for pkgquery.

This module provides parsing and validation for pkgquery.yaml configuration files.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import yaml

from pkgquery.core.cache import CACHE_SIZE
from pkgquery.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


CONFIG_FILE_NAME = "pkgquery.yaml"

# Kept in sync with pkgquery.packages.registry.PKG_MANAGER_CLASSES
SUPPORTED_PKG_MANAGERS = ["dpkg", "rpm", "pacman"]


@dataclass
class CacheConfig:
    """Ownership cache configuration."""

    size: int = CACHE_SIZE


@dataclass
class CommandConfig:
    """External command configuration."""

    timeout: Optional[float] = None  # seconds, None = wait indefinitely
    locale: Optional[str] = "C"  # LANG / LC_ALL for package manager commands


@dataclass
class ManagersConfig:
    """Package manager selection."""

    enabled: List[str] = field(default_factory=lambda: list(SUPPORTED_PKG_MANAGERS))


@dataclass
class PkgQueryConfig:
    """Complete pkgquery configuration."""

    version: int = 1
    cache: CacheConfig = field(default_factory=CacheConfig)
    commands: CommandConfig = field(default_factory=CommandConfig)
    managers: ManagersConfig = field(default_factory=ManagersConfig)


def parse_config(config_path: Path) -> PkgQueryConfig:
    """
    Parse pkgquery.yaml configuration file.

    Args:
        config_path: Path to pkgquery.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    return _parse_and_validate(data)


def load_config(config_path: Optional[Path] = None) -> PkgQueryConfig:
    """
    Load configuration, falling back to defaults.

    Args:
        config_path: Explicit configuration file. If None, ./pkgquery.yaml
            is used if it exists; otherwise the defaults are returned.

    Returns:
        Configuration

    Raises:
        ConfigError: If an explicitly given file is missing, or any file used
            is invalid
    """
    if config_path is None:
        default_path = Path.cwd() / CONFIG_FILE_NAME
        if not default_path.exists():
            logger.debug("No config file found, using defaults")
            return PkgQueryConfig()
        config_path = default_path

    logger.debug(f"Loading configuration from {config_path}")
    return parse_config(config_path)


def _parse_and_validate(data: dict) -> PkgQueryConfig:
    """Parse and validate configuration data."""
    if "version" not in data:
        raise ConfigError("Missing required field: version")

    if data["version"] != 1:
        raise ConfigError(f"Unsupported version: {data['version']} (expected 1)")

    return PkgQueryConfig(
        version=data["version"],
        cache=_parse_cache_config(_section(data, "cache")),
        commands=_parse_command_config(_section(data, "commands")),
        managers=_parse_managers_config(_section(data, "managers")),
    )


def _section(data: dict, name: str) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be a dictionary")
    return section


def _parse_cache_config(data: dict) -> CacheConfig:
    """Parse cache configuration."""
    size = data.get("size", CACHE_SIZE)

    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise ConfigError(f"cache.size must be a positive integer, got {size!r}")

    return CacheConfig(size=size)


def _parse_command_config(data: dict) -> CommandConfig:
    """Parse external command configuration."""
    timeout = data.get("timeout")

    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigError(f"commands.timeout must be a number, got {timeout!r}")
        if timeout <= 0:
            raise ConfigError(f"commands.timeout must be positive, got {timeout}")

    locale = data.get("locale", "C")
    if locale is not None and not isinstance(locale, str):
        raise ConfigError(f"commands.locale must be a string, got {locale!r}")

    return CommandConfig(timeout=timeout, locale=locale)


def _parse_managers_config(data: dict) -> ManagersConfig:
    """Parse package manager selection."""
    enabled = data.get("enabled", list(SUPPORTED_PKG_MANAGERS))

    if not isinstance(enabled, list):
        raise ConfigError("managers.enabled must be a list")

    for name in enabled:
        if name not in SUPPORTED_PKG_MANAGERS:
            raise ConfigError(
                f"Invalid package manager: {name} "
                f"(expected one of {SUPPORTED_PKG_MANAGERS})"
            )

    return ManagersConfig(enabled=list(enabled))
