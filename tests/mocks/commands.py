"""
Mock command runner for package manager backend tests.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from pkgquery.core.sysutil import COMMAND_FAILED, CommandResult, CommandRunner


class FakeRunner(CommandRunner):
    """
    CommandRunner that returns canned output instead of starting processes.

    Outputs are keyed by the full command line (command and arguments joined
    with single blanks). Unknown command lines fail with COMMAND_FAILED, as
    if the executable did not exist. try_run_command() is inherited, so the
    real output matching is used.

    Example:
        runner = FakeRunner(
            outputs={"/usr/bin/dpkg -S /usr/bin/ls": ("coreutils: /usr/bin/ls\\n", 0)},
            commands=["/usr/bin/dpkg"],
        )
    """

    def __init__(
        self,
        outputs: Optional[Dict[str, Tuple[str, int]]] = None,
        commands: Iterable[str] = (),
    ):
        super().__init__()
        self.outputs = dict(outputs or {})
        self.commands = set(commands)
        self.calls: List[str] = []

    def run_command(self, command, args) -> CommandResult:
        command_line = " ".join([str(command)] + list(args))
        self.calls.append(command_line)

        output, exit_code = self.outputs.get(command_line, ("", COMMAND_FAILED))
        return CommandResult(output=output, exit_code=exit_code)

    def have_command(self, command) -> bool:
        return str(command) in self.commands
