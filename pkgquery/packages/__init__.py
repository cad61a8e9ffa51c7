"""
Package manager backends for pkgquery.

This package provides a uniform interface to the package managers of
Linux distributions and a query service on top of them.

Available Components:
--------------------
- PkgInfo: One installed package (name, version, architecture)
- PkgManager: Abstract base class for package manager backends
- DpkgPkgManager: Debian / Ubuntu (dpkg)
- RpmPkgManager: SUSE / Red Hat / Fedora (rpm)
- PacManPkgManager: Arch Linux / Manjaro (pacman)
- PkgManagerRegistry: Detect the package managers of this system
- PkgQuery: Query service with ownership cache

Example Usage:
-------------
    from pkgquery.packages import create_pkg_query

    query = create_pkg_query()

    print(query.owning_pkg('/usr/bin/ls'))

    for pkg in query.installed_pkg():
        print(f"{pkg.name} {pkg.version} {pkg.arch}")
"""

from pkgquery.packages.base import (
    PkgInfo,
    PkgManager,
)
from pkgquery.packages.dpkg import DpkgPkgManager
from pkgquery.packages.rpm import RpmPkgManager
from pkgquery.packages.pacman import PacManPkgManager
from pkgquery.packages.registry import (
    DEFAULT_PKG_MANAGERS,
    PKG_MANAGER_CLASSES,
    PkgManagerRegistry,
    create_pkg_managers,
)
from pkgquery.packages.query import (
    PkgQuery,
    create_pkg_query,
)

from pkgquery.core.exceptions import (
    PkgManagerError,
    PkgManagerNotFoundError,
)

__all__ = [
    "PkgInfo",
    "PkgManager",
    "DpkgPkgManager",
    "RpmPkgManager",
    "PacManPkgManager",
    "DEFAULT_PKG_MANAGERS",
    "PKG_MANAGER_CLASSES",
    "PkgManagerRegistry",
    "create_pkg_managers",
    "PkgQuery",
    "create_pkg_query",
    "PkgManagerError",
    "PkgManagerNotFoundError",
]
