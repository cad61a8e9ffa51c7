"""
Detection of the package managers in charge of this system.

PkgManagerRegistry probes every supported backend once and keeps the ones
that are usable, ordered by precedence:

1. Primary package managers: the ones that report ownership of their own
   executable, i.e. the ones that installed the operating system.
2. Secondary package managers: installed, but not in charge of the system
   (e.g. rpm on Ubuntu).

Within each group, the probe order of DEFAULT_PKG_MANAGERS is kept.
Backends that are neither primary nor available are dropped.

Usage:
    from pkgquery.packages.registry import PkgManagerRegistry

    registry = PkgManagerRegistry()
    for pkg_manager in registry.detect():
        print(pkg_manager.name)
"""

import logging
import threading
from typing import Dict, List, Optional, Sequence, Type

from pkgquery.core.exceptions import PkgManagerNotFoundError
from pkgquery.core.sysutil import CommandRunner
from pkgquery.packages.base import PkgManager
from pkgquery.packages.dpkg import DpkgPkgManager
from pkgquery.packages.pacman import PacManPkgManager
from pkgquery.packages.rpm import RpmPkgManager

logger = logging.getLogger(__name__)


# Supported backends in probe order. A new backend needs an entry here.
PKG_MANAGER_CLASSES: Dict[str, Type[PkgManager]] = {
    "dpkg": DpkgPkgManager,
    "rpm": RpmPkgManager,
    "pacman": PacManPkgManager,
}

DEFAULT_PKG_MANAGERS: List[str] = list(PKG_MANAGER_CLASSES)


def create_pkg_managers(
    names: Optional[Sequence[str]] = None, runner: Optional[CommandRunner] = None
) -> List[PkgManager]:
    """
    Create backend instances in probe order.

    Args:
        names: Backend names to create; all supported backends if None.
            The result is always in probe order, regardless of the order
            of names.
        runner: Command runner shared by all backends

    Returns:
        Backend instances (not yet probed)

    Raises:
        PkgManagerNotFoundError: If a name is not a supported backend
    """
    if names is None:
        names = DEFAULT_PKG_MANAGERS

    for name in names:
        if name not in PKG_MANAGER_CLASSES:
            raise PkgManagerNotFoundError(name)

    runner = runner or CommandRunner()
    return [
        cls(runner) for name, cls in PKG_MANAGER_CLASSES.items() if name in names
    ]


class PkgManagerRegistry:
    """
    Ordered list of the package managers usable on this system.

    Detection runs once, on the first call to detect() (or the first access
    to pkg_managers); the result never changes afterwards.

    Attributes:
        candidates: Backends to probe, in probe order
    """

    def __init__(
        self,
        candidates: Optional[Sequence[PkgManager]] = None,
        runner: Optional[CommandRunner] = None,
    ):
        """
        Initialize registry.

        Args:
            candidates: Backends to probe; all supported backends if None
            runner: Command runner for the default backends (ignored if
                candidates are given)
        """
        if candidates is None:
            candidates = create_pkg_managers(runner=runner)

        self.candidates: List[PkgManager] = list(candidates)
        self._primary: List[PkgManager] = []
        self._secondary: List[PkgManager] = []
        self._pkg_managers: Optional[List[PkgManager]] = None
        self._lock = threading.Lock()

    @property
    def detected(self) -> bool:
        """True if detection has already run."""
        return self._pkg_managers is not None

    @property
    def pkg_managers(self) -> List[PkgManager]:
        """Active backends: primary ones first, then secondary ones."""
        return list(self.detect())

    @property
    def primary_pkg_managers(self) -> List[PkgManager]:
        self.detect()
        return list(self._primary)

    @property
    def secondary_pkg_managers(self) -> List[PkgManager]:
        self.detect()
        return list(self._secondary)

    def detect(self) -> List[PkgManager]:
        """
        Probe all candidates (only the first time) and return the active backends.

        Returns:
            Primary backends followed by secondary backends
        """
        with self._lock:
            if self._pkg_managers is None:
                self._pkg_managers = self._check_pkg_managers()

            return self._pkg_managers

    def _check_pkg_managers(self) -> List[PkgManager]:
        logger.info("Checking available supported package managers...")

        for pkg_manager in self.candidates:
            self._check_pkg_manager(pkg_manager)

        pkg_managers = self._primary + self._secondary

        if not pkg_managers:
            logger.info("No supported package manager found.")
        else:
            available = ", ".join(pkg_manager.name for pkg_manager in pkg_managers)
            logger.info(f"Found {available}")

        return pkg_managers

    def _check_pkg_manager(self, pkg_manager: PkgManager) -> None:
        if pkg_manager.is_primary_pkg_manager():
            logger.info(f"Found primary package manager {pkg_manager.name}")
            self._primary.append(pkg_manager)
        elif pkg_manager.is_available():
            logger.info(f"Found secondary package manager {pkg_manager.name}")
            self._secondary.append(pkg_manager)
        else:
            logger.debug(f"Package manager {pkg_manager.name} not found")
