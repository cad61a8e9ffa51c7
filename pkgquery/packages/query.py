"""
Package query service.

PkgQuery is the entry point for applications: it answers "which package
owns this path?", "which packages are installed?" and "which files belong
to this package?" using whatever package managers the registry found on
this system. Ownership answers are cached.

Usage:
    from pkgquery.packages.query import create_pkg_query

    query = create_pkg_query()
    if query.found_supported_pkg_manager():
        print(query.owning_pkg("/usr/bin/ls"))
"""

import os
import logging
import threading
from typing import List, Optional

from pkgquery.config.parser import PkgQueryConfig
from pkgquery.core.cache import CACHE_SIZE, QueryCache
from pkgquery.core.sysutil import CommandRunner
from pkgquery.packages.base import PkgInfo, PkgManager
from pkgquery.packages.registry import PkgManagerRegistry, create_pkg_managers

logger = logging.getLogger(__name__)


class PkgQuery:
    """
    Query installed packages across all usable package managers.

    Ownership lookups go to the package managers in registry order (primary
    before secondary) and stop at the first one that knows an owner.
    Installed package lists are collected from all package managers.

    No query raises if a package manager fails or does not know the answer;
    the result is just empty.

    Attributes:
        registry: Package managers of this system
        cache: Ownership lookup cache
    """

    def __init__(
        self,
        registry: Optional[PkgManagerRegistry] = None,
        cache: Optional[QueryCache] = None,
    ):
        """
        Initialize query service.

        Package manager detection is deferred to the first query.

        Args:
            registry: Package manager registry; probes all supported
                package managers if None
            cache: Ownership cache; a cache with the default size if None
        """
        self.registry = registry if registry is not None else PkgManagerRegistry()
        # An empty cache is falsy, so no 'or' here
        self.cache = cache if cache is not None else QueryCache(CACHE_SIZE)
        self._lock = threading.RLock()

    @property
    def pkg_managers(self) -> List[PkgManager]:
        """Active package managers in query order."""
        return self.registry.pkg_managers

    def found_supported_pkg_manager(self) -> bool:
        """
        Check if any supported package manager was found.

        Returns:
            True if at least one package manager is usable
        """
        return bool(self.pkg_managers)

    def owning_pkg(self, path: str) -> str:
        """
        Find the package that owns a path.

        The result is cached, even if it is empty, so each path is only
        looked up once while it stays in the cache.

        Args:
            path: Path to look up

        Returns:
            Package name, or an empty string if no package owns the path
        """
        # normpath("") is "."
        if path:
            path = os.path.normpath(path)

        with self._lock:
            pkg = self.cache.get(path)

            if pkg is not None:
                found_by = "Cache"
            else:
                pkg = ""
                found_by = "all"

                for pkg_manager in self.pkg_managers:
                    pkg = pkg_manager.owning_pkg(path)

                    if pkg:
                        found_by = pkg_manager.name
                        break

                self.cache.put(path, pkg)

        if pkg:
            logger.debug(f"{found_by}: Package {pkg} owns {path}")
        else:
            logger.debug(f"{found_by}: No package owns {path}")

        return pkg

    def installed_pkg(self) -> List[PkgInfo]:
        """
        Get the installed packages of all package managers.

        Packages managed by more than one package manager appear once for
        each of them.

        Returns:
            Packages in package manager order
        """
        pkg_list: List[PkgInfo] = []

        for pkg_manager in self.pkg_managers:
            pkg_list.extend(pkg_manager.installed_pkg())

        return pkg_list

    def file_list(self, pkg: PkgInfo) -> List[str]:
        """
        Get the files that belong to a package.

        Args:
            pkg: Package to list

        Returns:
            File list from the first package manager that has one, or an
            empty list
        """
        for pkg_manager in self.pkg_managers:
            file_list = pkg_manager.file_list(pkg)

            if file_list:
                return file_list

        return []


def create_pkg_query(config: Optional[PkgQueryConfig] = None) -> PkgQuery:
    """
    Create a query service for this system.

    Args:
        config: Configuration; defaults if None

    Returns:
        Query service (package managers are detected on first use)

    Raises:
        PkgManagerNotFoundError: If the configuration enables an unknown
            package manager

    Example:
        >>> from pkgquery.config import load_config
        >>> query = create_pkg_query(load_config())
    """
    config = config or PkgQueryConfig()

    runner = CommandRunner(
        timeout=config.commands.timeout, locale=config.commands.locale
    )
    candidates = create_pkg_managers(config.managers.enabled, runner)

    return PkgQuery(
        registry=PkgManagerRegistry(candidates),
        cache=QueryCache(config.cache.size),
    )
