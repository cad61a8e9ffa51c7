"""
Managers command implementation.

Shows the supported package managers found on this system.
"""

import logging

from pkgquery.cli.utils import get_pkg_query

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the managers command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    query = get_pkg_query(args)
    registry = query.registry

    primary = registry.primary_pkg_managers
    secondary = registry.secondary_pkg_managers

    if not primary and not secondary:
        print("No supported package manager found.")
        return 0

    for pkg_manager in primary:
        print(f"{pkg_manager.name} (primary)")

    for pkg_manager in secondary:
        print(f"{pkg_manager.name} (secondary)")

    return 0
