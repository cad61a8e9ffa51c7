"""
Entry point for running pkgquery CLI as a module.

Usage: python -m pkgquery [command] [options]
"""

from pkgquery.cli.parser import main

if __name__ == "__main__":
    main()
