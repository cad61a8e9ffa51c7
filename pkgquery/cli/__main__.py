"""
Entry point for running pkgquery CLI as a module.

Usage: python -m pkgquery.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
