"""
Base package manager abstraction for pkgquery.

This module provides the record type for installed packages and the
abstract base class every package manager backend (dpkg, rpm, pacman)
implements.

Classes:
    PkgInfo: One installed package (name, version, architecture)
    PkgManager: Abstract base class for package manager backends
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from pkgquery.core.sysutil import CommandRunner


# =============================================================================
# Package Record
# =============================================================================


@dataclass(frozen=True)
class PkgInfo:
    """
    An installed package as reported by a package manager.

    Two records are equal if name and architecture are equal; the version
    is informational only.

    Attributes:
        name: Package name (e.g., 'coreutils')
        version: Package version (e.g., '8.32-4.1ubuntu1')
        arch: Architecture (e.g., 'amd64', 'x86_64', 'all'); may be empty

    Example:
        pkg = PkgInfo(name='coreutils', version='8.32-4', arch='amd64')
    """

    name: str
    version: str = field(default="", compare=False)
    arch: str = ""

    def __str__(self) -> str:
        if self.arch:
            return f"{self.name}-{self.version}.{self.arch}"
        return f"{self.name}-{self.version}"


# =============================================================================
# Abstract Package Manager
# =============================================================================


class PkgManager(ABC):
    """
    Abstract base class for package manager backends.

    A backend knows how to find out whether its package manager is installed,
    whether it is the one that installed the operating system, and how to
    ask it which package owns a file or which packages are installed.

    None of the query methods raise when the package manager reports an
    error or does not know the answer; they return an empty result instead.

    Attributes:
        runner: Command runner used to start the package manager

    Abstract Methods:
        name: Package manager name
        is_primary_pkg_manager(): Check if this manager owns the system
        is_available(): Check if the manager's executable exists
        owning_pkg(): Find the package that owns a path

    Example:
        class ApkPkgManager(PkgManager):
            @property
            def name(self) -> str:
                return 'apk'

            def is_primary_pkg_manager(self) -> bool:
                return self.runner.try_run_command(
                    '/sbin/apk info --who-owns /sbin/apk', '.*is owned by apk-tools.*'
                )

            def is_available(self) -> bool:
                return self.runner.have_command('/sbin/apk')

            def owning_pkg(self, path: str) -> str:
                ...
    """

    def __init__(self, runner: Optional[CommandRunner] = None):
        """
        Initialize package manager backend.

        Args:
            runner: Command runner; a default CommandRunner if None
        """
        self.runner = runner or CommandRunner()

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Get the package manager name.

        Returns:
            Package manager name (e.g., 'dpkg', 'rpm')
        """
        pass

    @abstractmethod
    def is_primary_pkg_manager(self) -> bool:
        """
        Check if this is the primary package manager of the system.

        The primary package manager is the one that installed the system's
        core packages; it is the only one that reports ownership of its own
        executable. Any failure counts as "not primary".

        Returns:
            True if this package manager owns its own binary
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if this package manager is installed at all.

        Returns:
            True if the package manager's executable exists
        """
        pass

    @abstractmethod
    def owning_pkg(self, path: str) -> str:
        """
        Find the package that owns a file or directory.

        Args:
            path: Absolute path to look up

        Returns:
            Package name, or an empty string if no package owns the path or
            the package manager failed
        """
        pass

    def installed_pkg(self) -> List[PkgInfo]:
        """
        Get the list of installed packages.

        Returns:
            Installed packages, empty if not supported or on failure
        """
        return []

    def file_list(self, pkg: PkgInfo) -> List[str]:
        """
        Get the list of files that belong to a package.

        Args:
            pkg: Package to list

        Returns:
            File paths, empty if not supported or on failure
        """
        return []

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
