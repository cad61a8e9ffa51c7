"""
Mock implementations for testing pkgquery components.

This package provides stand-ins for external commands and package manager
backends to enable isolated, deterministic testing.
"""

from .commands import FakeRunner
from .pkg_managers import FakePkgManager

__all__ = [
    "FakeRunner",
    "FakePkgManager",
]
