"""
Command domain entities: a parsed input line and the outcome of running it.
"""

from dataclasses import dataclass
from enum import Enum

from myshell.exceptions import CommandError


@dataclass(frozen=True)
class ParsedCommand:
    """A keyword and at most one path argument taken from one input line."""

    keyword: str
    argument: str | None
    line: str

    @classmethod
    def parse(cls, line: str) -> "ParsedCommand | None":
        """
        Tokenize a stripped input line.

        Args:
            line: Input line with trailing whitespace already removed

        Returns:
            The parsed command, or None for a blank line
        """
        tokens = line.split()
        if not tokens:
            return None
        # Tokens after the first argument are ignored
        argument = tokens[1] if len(tokens) > 1 else None
        return cls(keyword=tokens[0], argument=argument, line=line)

    def has_argument(self) -> bool:
        return self.argument is not None


class CommandStatus(Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    TERMINATE = "terminate"


@dataclass(frozen=True)
class CommandResult:
    """Explicit outcome of one dispatched command.

    A failure without an error is a silent one: nothing is reported.
    """

    status: CommandStatus
    error: CommandError | None = None
    exit_code: int = 0

    @classmethod
    def ok(cls) -> "CommandResult":
        return cls(CommandStatus.SUCCESS)

    @classmethod
    def failure(cls, error: CommandError | None = None) -> "CommandResult":
        return cls(CommandStatus.FAILURE, error=error)

    @classmethod
    def terminate(cls, exit_code: int = 0) -> "CommandResult":
        return cls(CommandStatus.TERMINATE, exit_code=exit_code)

    @property
    def succeeded(self) -> bool:
        return self.status is not CommandStatus.FAILURE

    @property
    def should_exit(self) -> bool:
        return self.status is CommandStatus.TERMINATE
