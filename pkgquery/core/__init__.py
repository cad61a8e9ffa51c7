"""
Core functionality for pkgquery.

This package contains the foundational modules that the package manager
backends depend on.
"""

from .cache import (
    CACHE_SIZE,
    QueryCache,
)

from .sysutil import (
    COMMAND_FAILED,
    CommandResult,
    CommandRunner,
    have_command,
)

from .exceptions import (
    PkgQueryError,
    ConfigError,
    PkgManagerError,
    PkgManagerNotFoundError,
)

__all__ = [
    "CACHE_SIZE",
    "QueryCache",
    "COMMAND_FAILED",
    "CommandResult",
    "CommandRunner",
    "have_command",
    "PkgQueryError",
    "ConfigError",
    "PkgManagerError",
    "PkgManagerNotFoundError",
]
