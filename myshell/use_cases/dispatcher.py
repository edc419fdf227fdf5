"""
Command dispatcher: one ordered, exact-match table of built-in commands.
"""

import logging
from collections.abc import Callable, Iterable

from myshell.entities.command import CommandResult, ParsedCommand
from myshell.exceptions import UnknownCommandError
from myshell.ports.builtins.builtin_command_port import BuiltinCommandPort


class CommandDispatcher:
    """Maps a parsed keyword to its built-in command and runs it."""

    def __init__(
        self,
        commands: Iterable[BuiltinCommandPort],
        program_name: str = "myshell",
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            commands: Built-in commands, in lookup order
            program_name: Prefix of the unknown-command diagnostic
            logger: Logger instance to use for logging

        Raises:
            ValueError: If two commands share a keyword
        """
        self._commands: dict[str, BuiltinCommandPort] = {}
        for command in commands:
            if command.name in self._commands:
                raise ValueError(f"Duplicate built-in command: {command.name}")
            self._commands[command.name] = command
        self._program_name = program_name
        self._logger = logger or logging.getLogger(__name__)

    @property
    def keywords(self) -> list[str]:
        """Registered keywords in lookup order."""
        return list(self._commands)

    def resolve(self, command: ParsedCommand) -> BuiltinCommandPort | None:
        """
        Find the built-in that accepts a parsed line.

        A command that needs a path but was given none does not accept the line.

        Args:
            command: Parsed input line

        Returns:
            The built-in, or None when the line is not a recognised command
        """
        builtin = self._commands.get(command.keyword)
        if builtin is None or (builtin.requires_argument and not command.has_argument()):
            self._logger.debug(f"No built-in accepts: {command.line!r}")
            return None
        return builtin

    def dispatch(
        self,
        command: ParsedCommand,
        on_execute: Callable[[BuiltinCommandPort], None] | None = None,
    ) -> CommandResult:
        """
        Run the built-in selected by the command keyword.

        Args:
            command: Parsed input line
            on_execute: Called with the resolved built-in just before it runs

        Returns:
            The built-in's CommandResult, or a failure carrying
            UnknownCommandError when no built-in accepts the line
        """
        builtin = self.resolve(command)
        if builtin is None:
            return CommandResult.failure(UnknownCommandError(command.line, self._program_name))

        if on_execute is not None:
            on_execute(builtin)
        self._logger.debug(f"Dispatching {builtin.name} argument={command.argument!r}")
        return builtin.execute(command.argument)
