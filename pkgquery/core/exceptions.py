"""
Centralized exception hierarchy for pkgquery.

Package manager queries never raise for "not found" or for a failing
external command; those are reported as empty results. The exceptions
below cover configuration mistakes and programming errors only.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class PkgQueryError(Exception):
    """Base exception for all pkgquery errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(PkgQueryError):
    """Configuration parsing or validation error."""

    pass


# ============================================================================
# Package Manager Exceptions
# ============================================================================


class PkgManagerError(PkgQueryError):
    """Base exception for package manager errors."""

    pass


class PkgManagerNotFoundError(PkgManagerError):
    """Raised when a package manager name is not one of the supported backends."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unsupported package manager: {name}")
