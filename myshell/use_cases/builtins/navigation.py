"""
Working directory commands: cd and pwd.
"""

from typing_extensions import override

from myshell.entities.command import CommandResult
from myshell.exceptions import FileSystemError
from myshell.use_cases.builtins.base import FileSystemCommand


class ChangeDirectoryCommand(FileSystemCommand):
    """cd [path]: change the working directory, to home when no path is given."""

    name = "cd"

    @override
    def execute(self, argument: str | None) -> CommandResult:
        try:
            target = argument if argument is not None else self._file_system.home_directory()
            self._file_system.change_directory(target)
        except FileSystemError as e:
            return self._fail("cd", e)
        return CommandResult.ok()


class PrintWorkingDirectoryCommand(FileSystemCommand):
    """pwd: print the working directory, or nothing when it cannot be resolved."""

    name = "pwd"

    @override
    def execute(self, argument: str | None) -> CommandResult:
        try:
            cwd = self._file_system.current_directory()
        except FileSystemError as e:
            self._logger.info(f"pwd: {e} ({e.reason})")
            return CommandResult.failure()
        self._console.write_line(cwd)
        return CommandResult.ok()
