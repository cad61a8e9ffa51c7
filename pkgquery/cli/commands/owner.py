"""
Owner command implementation.

Shows which package owns each of the given paths.
"""

import logging

from pkgquery.cli.utils import EXIT_NO_PKG_MANAGER, get_pkg_query, require_pkg_manager

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the owner command.

    Args:
        args: Parsed command-line arguments with a paths attribute

    Returns:
        Exit code (0 for success)
    """
    query = get_pkg_query(args)

    if not require_pkg_manager(query, "owner"):
        return EXIT_NO_PKG_MANAGER

    for path in args.paths:
        pkg = query.owning_pkg(path)
        print(f"{path}: {pkg or '(not owned)'}")

    return 0
