"""
pkgquery - find out which package owns a file, across package managers.

Supports dpkg (Debian, Ubuntu), rpm (SUSE, Red Hat, Fedora) and pacman
(Arch Linux, Manjaro).
"""

from pkgquery.packages import (
    PkgInfo,
    PkgManager,
    PkgQuery,
    create_pkg_query,
)

__version__ = "0.1.0"

__all__ = [
    "PkgInfo",
    "PkgManager",
    "PkgQuery",
    "create_pkg_query",
    "__version__",
]
