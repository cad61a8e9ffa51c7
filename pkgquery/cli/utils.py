"""
Shared utilities for pkgquery CLI commands.
"""

import sys
import logging
from typing import Optional

from pkgquery.config.parser import load_config
from pkgquery.packages.query import PkgQuery, create_pkg_query

logger = logging.getLogger(__name__)


# Exit code when no supported package manager is found
EXIT_NO_PKG_MANAGER = 2


def get_pkg_query(args) -> PkgQuery:
    """
    Create the query service from the --config option.

    Args:
        args: Parsed arguments with an optional config attribute

    Returns:
        Query service

    Raises:
        ConfigError: If the configuration file is invalid
    """
    config = load_config(getattr(args, "config", None))
    return create_pkg_query(config)


def require_pkg_manager(query: PkgQuery, command_name: str) -> bool:
    """
    Check that a supported package manager exists, print an error if not.

    Args:
        query: Query service
        command_name: Command name for the error message

    Returns:
        True if at least one package manager was found
    """
    if query.found_supported_pkg_manager():
        return True

    print_error(
        f"Cannot run '{command_name}'",
        "No supported package manager found (dpkg, rpm, pacman)",
    )
    return False


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)
