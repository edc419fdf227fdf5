"""
Port interface for a built-in command.
"""

from abc import ABC, abstractmethod

from myshell.entities.command import CommandResult


class BuiltinCommandPort(ABC):
    """
    Port interface for one built-in command of the interpreter.

    Implementations wrap a single filesystem primitive and report the outcome
    as a CommandResult instead of raising.
    """

    #: Keyword that selects the command, matched exactly
    name: str = ""

    #: Whether the command needs a path argument
    requires_argument: bool = False

    @abstractmethod
    def execute(self, argument: str | None) -> CommandResult:
        """
        Run the command.

        Args:
            argument: Path argument, or None when none was given

        Returns:
            CommandResult describing success, failure or termination
        """
        pass
