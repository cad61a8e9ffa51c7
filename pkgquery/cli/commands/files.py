"""
Files command implementation.

Lists the files that belong to a package.
"""

import logging

from pkgquery.cli.utils import (
    EXIT_NO_PKG_MANAGER,
    get_pkg_query,
    print_error,
    require_pkg_manager,
)
from pkgquery.packages.base import PkgInfo

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the files command.

    Args:
        args: Parsed command-line arguments with package and arch attributes

    Returns:
        Exit code (0 for success, 1 if no files were found)
    """
    query = get_pkg_query(args)

    if not require_pkg_manager(query, "files"):
        return EXIT_NO_PKG_MANAGER

    pkg = PkgInfo(name=args.package, arch=getattr(args, "arch", "") or "")
    file_list = query.file_list(pkg)

    if not file_list:
        print_error(f"No files found for package {args.package}")
        return 1

    for path in file_list:
        print(path)

    return 0
