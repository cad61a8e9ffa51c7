"""
Debian / Ubuntu package manager backend (dpkg).

Queries used:
    dpkg -S PATH                       owning package
    dpkg-query --show --showformat=..  installed packages
    dpkg-query --listfiles PKG         files of a package
"""

import logging
from typing import List

from pkgquery.packages.base import PkgInfo, PkgManager

logger = logging.getLogger(__name__)


DPKG_COMMAND = "/usr/bin/dpkg"
DPKG_QUERY_COMMAND = "/usr/bin/dpkg-query"

# Printed by 'dpkg -S' if no package owns the path
NOT_OWNED_MARKER = "no path found matching pattern"

# Diversion notes in 'dpkg-query --listfiles' output
DIVERSION_PREFIXES = (
    "diverted by ",
    "locally diverted to: ",
    "package diverts others to: ",
)


class DpkgPkgManager(PkgManager):
    """Package manager backend for dpkg-based distributions."""

    @property
    def name(self) -> str:
        return "dpkg"

    def is_primary_pkg_manager(self) -> bool:
        return self.runner.try_run_command(
            f"{DPKG_COMMAND} -S {DPKG_COMMAND}", r"^dpkg:.*"
        )

    def is_available(self) -> bool:
        return self.runner.have_command(DPKG_COMMAND)

    def owning_pkg(self, path: str) -> str:
        result = self.runner.run_command(DPKG_COMMAND, ["-S", path])

        if result.exit_code != 0 or NOT_OWNED_MARKER in result.output:
            return ""

        return self.parse_owner(result.output)

    @staticmethod
    def parse_owner(output: str) -> str:
        """
        Extract the package name from 'dpkg -S' output.

        Sample output:

            coreutils: /usr/bin/ls
            libc6:amd64: /lib/x86_64-linux-gnu/libc.so.6

        For diverted files, dpkg prints 'diversion by ...' lines before the
        owner; they are skipped.

        Args:
            output: Raw command output

        Returns:
            Package name (everything before the first colon)
        """
        for line in output.split("\n"):
            if line and not line.startswith("diversion by "):
                return line.split(":", 1)[0].strip()

        return ""

    def installed_pkg(self) -> List[PkgInfo]:
        result = self.runner.run_command(
            DPKG_QUERY_COMMAND,
            ["--show", "--showformat=${Package} ${Architecture} ${Version}\n"],
        )

        if result.exit_code != 0:
            return []

        return self.parse_pkg_list(result.output)

    @staticmethod
    def parse_pkg_list(output: str) -> List[PkgInfo]:
        """
        Parse 'dpkg-query --show' output in 'name arch version' format.

        Lines that do not have exactly three blank-separated fields are
        logged and skipped.

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
            if len(fields) != 3:
                logger.error(f'Invalid dpkg-query output: "{line}"')
                continue

            name, arch, version = fields
            pkg_list.append(PkgInfo(name=name, version=version, arch=arch))

        return pkg_list

    def file_list(self, pkg: PkgInfo) -> List[str]:
        # Multi-arch packages must be qualified with their architecture
        if pkg.arch and pkg.arch != "all":
            pkg_name = f"{pkg.name}:{pkg.arch}"
        else:
            pkg_name = pkg.name

        result = self.runner.run_command(DPKG_QUERY_COMMAND, ["--listfiles", pkg_name])

        if result.exit_code != 0:
            return []

        return self.parse_file_list(result.output)

    @staticmethod
    def parse_file_list(output: str) -> List[str]:
        """
        Parse 'dpkg-query --listfiles' output.

        Besides plain paths, the output contains diversion notes like
        'diverted by dash to: /usr/share/man/man1/sh.distrib.1.gz' after the
        diverted path; these notes are skipped.

        Args:
            output: Raw command output

        Returns:
            File paths in output order
        """
        file_list = []

        for line in output.split("\n"):
            line = line.strip()
            if not line or line == "/.":
                continue

            if line.startswith(DIVERSION_PREFIXES):
                continue

            file_list.append(line)

        return file_list
