"""
Subprocess helpers used by the package manager backends.

Every backend query boils down to running one external command and looking
at its output and exit code. This module keeps that in one place:

- run_command(): run a command, capture stdout+stderr and the exit code
- try_run_command(): run a command line and check its output against a regexp
- have_command(): check that an executable exists

None of these raise for a failing or missing command; a failure is reported
as a non-zero exit code (or False) and logged at DEBUG level.

Usage:
    from pkgquery.core.sysutil import CommandRunner

    runner = CommandRunner()
    result = runner.run_command("/usr/bin/dpkg", ["-S", "/usr/bin/ls"])
    if result.exit_code == 0:
        print(result.output)
"""

import os
import re
import shlex
import subprocess
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)


# Exit code reported when the command could not be started or timed out
COMMAND_FAILED = -1


@dataclass(frozen=True)
class CommandResult:
    """
    Output and exit code of one external command.

    Attributes:
        output: Captured stdout with stderr merged into it
        exit_code: Process exit code, or COMMAND_FAILED if it never ran to completion
    """

    output: str
    exit_code: int

    @property
    def success(self) -> bool:
        """True if the command exited with code 0."""
        return self.exit_code == 0


def have_command(command: Union[str, Path]) -> bool:
    """
    Check if a command exists and is executable.

    Args:
        command: Absolute path to the command

    Returns:
        True if the file exists and is executable
    """
    path = Path(command)
    return path.is_file() and os.access(path, os.X_OK)


class CommandRunner:
    """
    Run external commands with a fixed locale and optional timeout.

    Package manager output is parsed by matching fixed English strings
    ("not owned by any package" etc.), so child processes get LANG and
    LC_ALL set to the configured locale.

    Attributes:
        timeout: Seconds to wait for a command, or None to wait indefinitely
        locale: Value for LANG / LC_ALL in the child environment (None keeps
            the caller's environment untouched)
    """

    def __init__(self, timeout: Optional[float] = None, locale: Optional[str] = "C"):
        self.timeout = timeout
        self.locale = locale

    def _environment(self) -> dict:
        env = os.environ.copy()
        if self.locale:
            env["LANG"] = self.locale
            env["LC_ALL"] = self.locale
        return env

    def run_command(self, command: Union[str, Path], args: List[str]) -> CommandResult:
        """
        Run a command and capture its output.

        Args:
            command: Path to the executable
            args: Command line arguments

        Returns:
            CommandResult with merged stdout/stderr and exit code
        """
        cmd = [str(command)] + list(args)
        logger.debug(f"Running {shlex.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                env=self._environment(),
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.warning(f"Timeout after {self.timeout}s: {shlex.join(cmd)}")
            return CommandResult(output="", exit_code=COMMAND_FAILED)
        except (OSError, ValueError) as e:
            logger.debug(f"Could not run {cmd[0]}: {e}")
            return CommandResult(output="", exit_code=COMMAND_FAILED)

        if result.returncode != 0:
            logger.debug(f"{cmd[0]} exited with {result.returncode}")

        return CommandResult(output=result.stdout, exit_code=result.returncode)

    def try_run_command(self, command_line: str, expected: str) -> bool:
        """
        Run a command line and check if its output matches a regexp.

        The whole output must match; '.' also matches newlines.

        Args:
            command_line: Command and arguments separated by blanks
            expected: Regular expression the output has to match

        Returns:
            True if the command exited with 0 and the output matches
        """
        args = shlex.split(command_line)
        if not args:
            return False

        result = self.run_command(args[0], args[1:])
        if not result.success:
            return False

        matched = re.fullmatch(expected, result.output, re.DOTALL) is not None
        logger.debug(
            f"{command_line}: output {'matches' if matched else 'does not match'} "
            f"{expected!r}"
        )
        return matched

    def have_command(self, command: Union[str, Path]) -> bool:
        """Check if a command exists and is executable."""
        return have_command(command)
