"""
Directory commands: mkdir and rmdir.
"""

from typing_extensions import override

from myshell.entities.command import CommandResult
from myshell.exceptions import FileSystemError
from myshell.use_cases.builtins.base import FileSystemCommand

DIRECTORY_MODE = 0o755


class MakeDirectoryCommand(FileSystemCommand):
    name = "mkdir"
    requires_argument = True

    @override
    def execute(self, argument: str | None) -> CommandResult:
        try:
            self._file_system.make_directory(argument, DIRECTORY_MODE)
        except FileSystemError as e:
            return self._fail(f"error making directory {argument}", e)
        return CommandResult.ok()


class RemoveDirectoryCommand(FileSystemCommand):
    name = "rmdir"
    requires_argument = True

    @override
    def execute(self, argument: str | None) -> CommandResult:
        try:
            self._file_system.remove_directory(argument)
        except FileSystemError as e:
            return self._fail(f"error removing directory {argument}", e)
        return CommandResult.ok()
