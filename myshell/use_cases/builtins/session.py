"""
Session command: exit.
"""

from typing_extensions import override

from myshell.entities.command import CommandResult
from myshell.ports.builtins.builtin_command_port import BuiltinCommandPort


class ExitCommand(BuiltinCommandPort):
    """exit: end the session with status 0."""

    name = "exit"

    @override
    def execute(self, argument: str | None) -> CommandResult:
        return CommandResult.terminate(0)
