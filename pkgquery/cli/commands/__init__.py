"""CLI command implementations for pkgquery."""
