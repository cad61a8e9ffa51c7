"""
RPM package manager backend (SUSE, Red Hat, Fedora, and rpm as a
secondary package manager on other distributions).

Queries used:
    rpm -qf --queryformat %{NAME} PATH     owning package
    rpm -qa --queryformat ...              installed packages
    rpm -ql PKG                            files of a package
"""

import logging
from typing import List, Optional

from pkgquery.core.sysutil import CommandRunner
from pkgquery.packages.base import PkgInfo, PkgManager

logger = logging.getLogger(__name__)


RPM_COMMAND = "/usr/bin/rpm"

# Old SUSE and Red Hat distributions only have this one
RPM_LEGACY_COMMAND = "/bin/rpm"

# Printed by 'rpm -qf' if no package owns the path
NOT_OWNED_MARKER = "not owned by any package"

# Separator in the installed packages query format
FIELD_SEPARATOR = " | "


class RpmPkgManager(PkgManager):
    """
    Package manager backend for rpm-based distributions.

    Attributes:
        rpm_command: Path to the rpm executable. Never empty, even if rpm is
            not installed at all; is_available() tells whether it exists.
    """

    def __init__(self, runner: Optional[CommandRunner] = None):
        super().__init__(runner)

        # A symlink /bin/rpm -> /usr/bin/rpm cannot be relied on: rpm as a
        # secondary package manager on Ubuntu only has /usr/bin/rpm.
        if self.runner.have_command(RPM_COMMAND):
            self.rpm_command = RPM_COMMAND
        else:
            self.rpm_command = RPM_LEGACY_COMMAND

    @property
    def name(self) -> str:
        return "rpm"

    def is_primary_pkg_manager(self) -> bool:
        return self.runner.try_run_command(
            f"{self.rpm_command} -qf {self.rpm_command}", r"^rpm.*"
        )

    def is_available(self) -> bool:
        return self.runner.have_command(self.rpm_command)

    def owning_pkg(self, path: str) -> str:
        result = self.runner.run_command(
            self.rpm_command, ["-qf", "--queryformat", "%{NAME}", path]
        )

        if result.exit_code != 0 or NOT_OWNED_MARKER in result.output:
            return ""

        return result.output.strip()

    def installed_pkg(self) -> List[PkgInfo]:
        result = self.runner.run_command(
            self.rpm_command,
            [
                "-qa",
                "--queryformat",
                "%{name} | %{version}-%{release} | %{arch}\n",
            ],
        )

        if result.exit_code != 0:
            return []

        return self.parse_pkg_list(result.output)

    @staticmethod
    def parse_pkg_list(output: str) -> List[PkgInfo]:
        """
        Parse 'rpm -qa' output in 'name | version-release | arch' format.

        Malformed lines are logged and skipped. The 'gpg-pubkey' pseudo
        packages that hold the imported signing keys are skipped, too.

        Args:
            output: Raw command output

        Returns:
            Parsed packages in output order
        """
        pkg_list = []

        for line in output.split("\n"):
            if not line:
                continue

            fields = line.split(FIELD_SEPARATOR)
            if len(fields) != 3:
                logger.error(f'Invalid rpm -qa output: "{line}"')
                continue

            name, version, arch = fields
            if name == "gpg-pubkey":
                continue

            # rpm prints "(none)" for packages without an architecture tag
            if arch == "(none)":
                arch = ""

            pkg_list.append(PkgInfo(name=name, version=version, arch=arch))

        return pkg_list

    def file_list(self, pkg: PkgInfo) -> List[str]:
        result = self.runner.run_command(self.rpm_command, ["-ql", pkg.name])

        if result.exit_code != 0:
            return []

        # 'rpm -ql' prints this for packages without any files
        return [
            line
            for line in result.output.split("\n")
            if line and line != "(contains no files)"
        ]
