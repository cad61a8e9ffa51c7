"""
pkgquery command line.

Each subcommand lives in its own module under pkgquery.cli.commands and
exposes run(args) -> int.
"""

import argparse
import importlib
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from pkgquery import __version__

logger = logging.getLogger(__name__)


COMMAND_MODULES = {
    "managers": "pkgquery.cli.commands.managers",
    "owner": "pkgquery.cli.commands.owner",
    "installed": "pkgquery.cli.commands.installed",
    "files": "pkgquery.cli.commands.files",
}

EXIT_INTERRUPTED = 130


class CLI:
    """Argument parsing, logging setup and command dispatch."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="pkgquery",
            description="Ask the system package managers (dpkg, rpm, pacman) "
            "which package owns a file",
            epilog='Run "pkgquery COMMAND --help" for the options of a command',
        )

        parser.add_argument(
            "--version", action="version", version=f"pkgquery {__version__}"
        )
        verbosity = parser.add_mutually_exclusive_group()
        verbosity.add_argument(
            "--verbose", "-v", action="store_true", help="log package manager queries"
        )
        verbosity.add_argument(
            "--quiet", "-q", action="store_true", help="only log errors"
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="configuration file (default: ./pkgquery.yaml if present)",
        )

        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

        subparsers.add_parser(
            "managers", help="show the package managers found on this system"
        )

        owner = subparsers.add_parser("owner", help="show the owning package of paths")
        owner.add_argument("paths", nargs="+", metavar="PATH")

        installed = subparsers.add_parser("installed", help="list installed packages")
        installed.add_argument(
            "--filter", metavar="TEXT", help="only names containing TEXT"
        )

        files = subparsers.add_parser("files", help="list the files of a package")
        files.add_argument("package", metavar="NAME")
        files.add_argument(
            "--arch", default="", metavar="ARCH", help="architecture, e.g. amd64"
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Parse args, set up logging and run the selected command.

        Returns:
            The command's exit code, 1 on unexpected errors or a missing
            command, 130 if interrupted
        """
        parsed_args = self.parse_args(args)
        setup_logging(parsed_args.verbose, parsed_args.quiet)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            module = importlib.import_module(COMMAND_MODULES[parsed_args.command])
            return module.run(parsed_args)
        except KeyboardInterrupt:
            logger.info("Interrupted")
            return EXIT_INTERRUPTED
        except Exception as e:
            logger.error(f"{parsed_args.command} failed: {e}")
            if parsed_args.verbose:
                traceback.print_exc()
            return 1


def setup_logging(verbose: bool = False, quiet: bool = False):
    if verbose:
        level, fmt = logging.DEBUG, "%(levelname)s [%(name)s] %(message)s"
    elif quiet:
        level, fmt = logging.ERROR, "%(levelname)s: %(message)s"
    else:
        level, fmt = logging.INFO, "%(message)s"

    logging.basicConfig(level=level, format=fmt, force=True)


def main():
    sys.exit(CLI().run())


if __name__ == "__main__":
    main()
