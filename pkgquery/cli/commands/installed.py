"""
Installed command implementation.

Lists the installed packages of all package managers.
"""

import logging

from pkgquery.cli.utils import EXIT_NO_PKG_MANAGER, get_pkg_query, require_pkg_manager

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the installed command.

    Args:
        args: Parsed command-line arguments with an optional filter attribute

    Returns:
        Exit code (0 for success)
    """
    query = get_pkg_query(args)

    if not require_pkg_manager(query, "installed"):
        return EXIT_NO_PKG_MANAGER

    pkg_list = query.installed_pkg()
    name_filter = getattr(args, "filter", None)

    if name_filter:
        pkg_list = [pkg for pkg in pkg_list if name_filter in pkg.name]

    for pkg in pkg_list:
        print(f"{pkg.name} {pkg.version} {pkg.arch}".rstrip())

    logger.debug(f"{len(pkg_list)} packages")
    return 0
