"""
Shared plumbing for built-in commands backed by the filesystem port.
"""

import logging

from myshell.entities.command import CommandResult
from myshell.exceptions import CommandError, FileSystemError
from myshell.ports.builtins.builtin_command_port import BuiltinCommandPort
from myshell.ports.console.console_port import ConsolePort
from myshell.ports.files.filesystem_port import FileSystemPort


class FileSystemCommand(BuiltinCommandPort):
    """Base class for commands that call one filesystem primitive."""

    def __init__(
        self,
        file_system: FileSystemPort,
        console: ConsolePort,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the command.

        Args:
            file_system: Port used for the filesystem primitive
            console: Port used for output
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._console = console
        self._logger = logger or logging.getLogger(__name__)

    def _fail(self, context: str, error: FileSystemError) -> CommandResult:
        """
        Turn a filesystem failure into a failed result.

        Args:
            context: Prefix of the diagnostic, e.g. 'cd'
            error: Failure raised by the filesystem port

        Returns:
            Failed CommandResult carrying the diagnostic
        """
        self._logger.info(f"{self.name} failed: {error} ({error.reason})")
        return CommandResult.failure(CommandError(context, error.reason))
