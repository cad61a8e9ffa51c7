"""
Arch Linux / Manjaro package manager backend (pacman).

Queries used:
    pacman -Qo PATH     owning package
    pacman -Q           installed packages

Listing the files of a package is not supported for pacman; file_list()
always returns an empty list.
"""

import re
import logging
from typing import List

from pkgquery.packages.base import PkgInfo, PkgManager

logger = logging.getLogger(__name__)


PACMAN_COMMAND = "/usr/bin/pacman"

# Printed by 'pacman -Qo' if no package owns the path
NOT_OWNED_MARKER = "No package owns"

OWNED_BY_PREFIX = re.compile(r"^.*is owned by ")


class PacManPkgManager(PkgManager):
    """Package manager backend for pacman-based distributions."""

    @property
    def name(self) -> str:
        return "pacman"

    def is_primary_pkg_manager(self) -> bool:
        return self.runner.try_run_command(
            f"{PACMAN_COMMAND} -Qo {PACMAN_COMMAND}", r".*is owned by pacman.*"
        )

    def is_available(self) -> bool:
        return self.runner.have_command(PACMAN_COMMAND)

    def owning_pkg(self, path: str) -> str:
        result = self.runner.run_command(PACMAN_COMMAND, ["-Qo", path])

        if result.exit_code != 0 or NOT_OWNED_MARKER in result.output:
            return ""

        return self.parse_owner(result.output)

    @staticmethod
    def parse_owner(output: str) -> str:
        """
        Extract the package name from 'pacman -Qo' output.

        Sample output:

            /usr/bin/pacman is owned by pacman 5.1.1-3

        The path might contain blanks, so everything up to and including
        'is owned by ' is removed before taking the first word.

        Args:
            output: Raw command output

        Returns:
            Package name
        """
        output = OWNED_BY_PREFIX.sub("", output, count=1)
        return output.split(" ", 1)[0].strip()

    def installed_pkg(self) -> List[PkgInfo]:
        result = self.runner.run_command(PACMAN_COMMAND, ["-Q"])

        if result.exit_code != 0:
            return []

        return self.parse_pkg_list(result.output)

    @staticmethod
    def parse_pkg_list(output: str) -> List[PkgInfo]:
        """
        Parse 'pacman -Q' output in 'name version' format.

        pacman does not report the architecture here, so it stays empty.
        Malformed lines are logged and skipped.

        Args:
            output: Raw command output

        Returns:
            Parsed packages in output order
        """
        pkg_list = []

        for line in output.split("\n"):
            if not line:
                continue

            fields = line.split(" ")
            if len(fields) != 2:
                logger.error(f'Invalid pacman -Q output: "{line}"')
                continue

            name, version = fields
            pkg_list.append(PkgInfo(name=name, version=version))

        return pkg_list
